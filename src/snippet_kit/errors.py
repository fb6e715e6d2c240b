# src/snippet_kit/errors.py


class SnippetKitError(Exception):
    """Base class for every error raised by snippet-kit."""


class InvalidPatternError(SnippetKitError):
    """A user supplied regular expression could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern '{pattern}': {reason}")


class ReplaceStepFailedError(SnippetKitError):
    """A replace chain was aborted at one of its steps.

    Steps before ``step_index`` have already been applied; ``text`` holds
    their committed output so the caller can still write it back.
    """

    def __init__(
        self,
        *,
        operation: str,
        step_index: int,
        pattern: str,
        reason: str,
        text: str,
    ) -> None:
        self.operation = operation
        self.step_index = step_index
        self.pattern = pattern
        self.reason = reason
        self.text = text
        super().__init__(
            f"Operation '{operation}' failed at step {step_index + 1} "
            f"(pattern '{pattern}'): {reason}"
        )

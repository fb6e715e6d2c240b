# src/snippet_kit/replace/engine.py

import logging
import re

from snippet_kit.errors import InvalidPatternError, ReplaceStepFailedError
from snippet_kit.observability import names
from snippet_kit.observability.base import MetricsHook, NoOpMetricsHook, timed
from snippet_kit.regions import Replacement, TextRegion
from snippet_kit.text.patterns import compile_pattern

from .escapes import decode_escapes
from .models import ReplaceOperation
from .template import expand_template

logger = logging.getLogger(__name__)


class ReplaceEngine:
    """Applies the steps of a replace operation one after another.

    Each step runs over the output of the previous one. A step whose pattern
    does not compile aborts the chain; earlier steps stay applied and their
    output is carried on the raised :class:`ReplaceStepFailedError`.
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def apply(self, operation: ReplaceOperation, text: str) -> str:
        logger.debug(
            "Applying operation: name=%s, steps=%d", operation.name, len(operation.steps)
        )

        with timed(self.metrics_hook, names.REPLACE_DURATION):
            buffer = text
            for index, step in enumerate(operation.steps):
                buffer = self._apply_step(operation, index, buffer)

        self.metrics_hook.increment(
            names.REPLACE_STEPS_TOTAL,
            len(operation.steps),
            labels={"operation": operation.name},
        )
        logger.info(
            "Operation %s applied: steps=%d", operation.name, len(operation.steps)
        )
        return buffer

    def _apply_step(self, operation: ReplaceOperation, index: int, buffer: str) -> str:
        step = operation.steps[index]
        try:
            regex = compile_pattern(step.find, re.MULTILINE)
        except InvalidPatternError as e:
            self.metrics_hook.increment(
                names.REPLACE_ERRORS_TOTAL, labels={"operation": operation.name}
            )
            logger.error(
                "Operation %s aborted at step %d of %d",
                operation.name,
                index + 1,
                len(operation.steps),
            )
            raise ReplaceStepFailedError(
                operation=operation.name,
                step_index=index,
                pattern=step.find,
                reason=e.reason,
                text=buffer,
            ) from e

        template = decode_escapes(step.replace)
        return regex.sub(lambda m: expand_template(template, m), buffer)

    def apply_to_region(
        self, region: TextRegion, operation: ReplaceOperation
    ) -> Replacement | None:
        if not region.text:
            logger.info("Nothing to replace: empty region")
            return None
        return Replacement(
            start_line=region.start_line,
            end_line=region.end_line,
            text=self.apply(operation, region.text),
        )

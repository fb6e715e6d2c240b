import logging
from typing import Protocol

import yaml

from .models import ReplaceOperation, ReplaceStep

logger = logging.getLogger(__name__)


class OperationPersistence(Protocol):
    """Host-side storage for the saved operation list."""

    def get(self) -> list[ReplaceOperation]: ...

    def set(self, operations: list[ReplaceOperation]) -> None: ...


class OperationStore:
    """Named replace operations, written through to the host's storage."""

    def __init__(self, persistence: OperationPersistence) -> None:
        self._persistence = persistence
        self._operations: dict[str, ReplaceOperation] = {}
        for operation in persistence.get():
            self._operations[operation.name] = operation
        logger.debug("Loaded %d replace operations", len(self._operations))

    def get(self, name: str) -> ReplaceOperation:
        try:
            return self._operations[name]
        except KeyError:
            logger.error("Operation not found: %s", name)
            raise KeyError(f"Operation '{name}' not found")

    def list(self) -> list[str]:
        return list(self._operations)

    def save(self, operation: ReplaceOperation) -> None:
        """Add ``operation``, replacing any operation with the same name."""
        self._operations[operation.name] = operation
        logger.debug("Saved operation: %s", operation.name)
        self._flush()

    def remove(self, name: str) -> None:
        try:
            del self._operations[name]
        except KeyError:
            logger.error("Cannot remove operation, not found: %s", name)
            raise KeyError(f"Operation '{name}' not found")
        logger.debug("Removed operation: %s", name)
        self._flush()

    def add_step(self, name: str, step: ReplaceStep) -> ReplaceOperation:
        operation = self.get(name)
        updated = operation.model_copy(update={"steps": [*operation.steps, step]})
        self.save(updated)
        return updated

    def remove_step(self, name: str, index: int) -> ReplaceOperation:
        operation = self.get(name)
        if not 0 <= index < len(operation.steps):
            raise IndexError(f"Operation '{name}' has no step {index + 1}")
        steps = [s for i, s in enumerate(operation.steps) if i != index]
        updated = operation.model_copy(update={"steps": steps})
        self.save(updated)
        return updated

    def _flush(self) -> None:
        self._persistence.set(list(self._operations.values()))


def dump_operations(operations: list[ReplaceOperation]) -> str:
    """Serialize operations to YAML for sharing between installations."""
    return yaml.safe_dump(
        [operation.model_dump() for operation in operations],
        allow_unicode=True,
        sort_keys=False,
    )


def load_operations(text: str) -> list[ReplaceOperation]:
    data = yaml.safe_load(text) or []
    if not isinstance(data, list):
        raise ValueError("Expected a list of operations")
    return [ReplaceOperation(**item) for item in data]

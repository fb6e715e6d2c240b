# src/snippet_kit/snippets/models.py

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ParsedSnippet:
    name: str
    scope: str | None
    prefix: str
    body: str


@dataclass(frozen=True)
class SnippetFile:
    """Everything the host needs to write a snippet file."""

    directory: Path
    filename: str
    content: str

    @property
    def path(self) -> Path:
        return self.directory / self.filename

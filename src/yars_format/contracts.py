"""Public result models for file-level formatting."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class FileOutcome(BaseModel):
    """Outcome of formatting a single file."""
    path: str
    changed: bool
    lines_changed: int = 0  # differing line positions between original and formatted text
    written: bool = False  # True only when the file was rewritten on disk

    model_config = ConfigDict(extra="forbid")


class BatchResult(BaseModel):
    """Aggregated outcome of formatting several files."""
    changed: int = 0
    errors: int = 0
    messages: List[str] = Field(default_factory=list)  # error messages, input order
    outcomes: List[FileOutcome] = Field(default_factory=list)  # successful files, input order

    model_config = ConfigDict(extra="forbid")

    @property
    def succeeded(self) -> int:
        return len(self.outcomes)

    @property
    def unchanged(self) -> int:
        return self.succeeded - self.changed

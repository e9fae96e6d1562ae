"""Data models for the transform pipeline and project updates"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class ListMode(str, Enum):
    plain     = "plain"
    unordered = "unordered"
    ordered   = "ordered"


@dataclass(frozen=True)
class ListState:
    """List restructurer state: current mode plus the lines buffered for the open block."""
    mode:   ListMode = ListMode.plain
    buffer: tuple[str, ...] = ()


class PartResult(BaseModel):
    """Outcome of processing one source document into a project."""
    part:     str
    articles: list[Path]            # src/<part>/NNN.tex, in article order
    media:    list[Path] = []       # files extracted to media/<part>/
    inserted: bool = False          # \input lines were added to the main document

"""Core RouteFinder data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


@dataclass(slots=True, frozen=True)
class ImportDeclaration:
    """Single import statement found in a manifest."""

    specifier: str
    line: int
    alias: Optional[str] = None
    entity: Optional[str] = None


@dataclass(slots=True, frozen=True)
class RouteDeclaration:
    """Route declared in a manifest together with the widget it builds."""

    route_name: str
    widget_name: str
    line: int


class ResolutionStatus(str, Enum):
    RESOLVED = "resolved"
    NO_PROJECT_ROOT = "no_project_root"
    MANIFEST_NOT_FOUND = "manifest_not_found"
    MANIFEST_UNREADABLE = "manifest_unreadable"
    NO_MATCH = "no_match"

    def describe(self, entity: str) -> str:
        messages = {
            ResolutionStatus.RESOLVED: f"Resolved {entity}",
            ResolutionStatus.NO_PROJECT_ROOT: "No project root found",
            ResolutionStatus.MANIFEST_NOT_FOUND: "Routes manifest not found",
            ResolutionStatus.MANIFEST_UNREADABLE: "Routes manifest could not be read",
            ResolutionStatus.NO_MATCH: f"No import found for {entity}",
        }
        return messages[self]


@dataclass(slots=True)
class ResolutionResult:
    """Outcome of a single entity lookup."""

    entity: str
    key: str
    status: ResolutionStatus
    path: Optional[Path] = None
    specifier: Optional[str] = None
    manifests_scanned: List[Path] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.path is not None


@dataclass(slots=True, frozen=True)
class RouteToken:
    route_name: str
    widget_name: str
    offset: int
    line: int
    column: int


@dataclass(slots=True)
class RouteDefinition:
    """Route token paired with the file defining its widget.

    ``line_number`` is the line of the token in the scanned document.
    """

    route_name: str
    widget_name: str
    file_path: Path
    line_number: int = 0


@dataclass(slots=True, frozen=True)
class DeclarationLocation:
    path: Path
    line: int
    column: int

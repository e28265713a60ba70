"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

DEFAULT_MANIFEST_FILENAME = "routes.gr.dart"
DEFAULT_ROUTE_SUFFIX = "Route"
DEFAULT_ENTITY_SUFFIX = "Screen"


def _default_alternates() -> tuple[str, ...]:
    return (
        DEFAULT_MANIFEST_FILENAME,
        f"lib/generated/{DEFAULT_MANIFEST_FILENAME}",
        f"lib/app/{DEFAULT_MANIFEST_FILENAME}",
    )


@dataclass(slots=True)
class AppConfig:
    root: Path | None = None
    manifest_filename: str = DEFAULT_MANIFEST_FILENAME
    default_manifest_path: str = f"lib/{DEFAULT_MANIFEST_FILENAME}"
    alternate_manifest_paths: tuple[str, ...] = field(default_factory=_default_alternates)
    excluded_dirs: frozenset[str] = frozenset({"node_modules", ".dart_tool", "build", ".git"})
    max_results: int = 50
    source_extension: str = ".dart"
    package_source_dir: str = "lib"
    bare_imports: Literal["lib", "manifest"] = "lib"
    route_suffix: str = DEFAULT_ROUTE_SUFFIX
    entity_suffix: str = DEFAULT_ENTITY_SUFFIX
    fallback_heuristics: bool = False

    @classmethod
    def from_replace_in_route_name(cls, setting: str, **kwargs: object) -> "AppConfig":
        """Build a config from a ``"Screen,Route"`` style suffix setting."""
        entity_suffix, _, route_suffix = setting.partition(",")
        entity_suffix = entity_suffix.strip() or DEFAULT_ENTITY_SUFFIX
        route_suffix = route_suffix.strip() or DEFAULT_ROUTE_SUFFIX
        return cls(entity_suffix=entity_suffix, route_suffix=route_suffix, **kwargs)  # type: ignore[arg-type]

    @property
    def manifest_locations(self) -> tuple[str, ...]:
        """Conventional manifest locations, highest priority first."""
        return (self.default_manifest_path, *self.alternate_manifest_paths)

    def resolve_root(self, base_dir: Path | None = None) -> Path | None:
        if self.root is None:
            return None
        if Path(self.root).is_absolute() or base_dir is None:
            return Path(self.root)
        return base_dir / self.root

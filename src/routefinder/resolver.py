"""Resolution of widget names to the files that define them."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional, Tuple

from routefinder.config import AppConfig
from routefinder.manifest.imports import parse_imports, parse_route_declarations
from routefinder.manifest.locator import ManifestLocator
from routefinder.models import ImportDeclaration, ResolutionResult, ResolutionStatus
from routefinder.utils.files import read_text
from routefinder.utils.text import strip_suffix, to_snake_case

LOGGER = logging.getLogger(__name__)

_PACKAGE_IMPORT = re.compile(r"^package:[^/]+/(.+)$")
_SCHEME = re.compile(r"^[A-Za-z][\w+.-]*:")


def import_to_path(
    specifier: str,
    root: Path,
    manifest_path: Optional[Path] = None,
    config: AppConfig | None = None,
) -> Optional[Path]:
    """Translate an import specifier into a file-system path.

    Returns ``None`` for specifiers that cannot be classified, such as SDK
    imports (``dart:``) or a ``package:`` URI without a path.
    """
    config = config or AppConfig()
    source_dir = root / config.package_source_dir

    if specifier.startswith("package:"):
        match = _PACKAGE_IMPORT.match(specifier)
        return source_dir.joinpath(*PurePosixPath(match.group(1)).parts) if match else None

    if os.path.isabs(specifier):
        return Path(specifier)

    if _SCHEME.match(specifier):
        return None

    relative = PurePosixPath(specifier)
    if specifier.startswith(("./", "../")):
        if manifest_path is None:
            return None
        return Path(os.path.normpath(manifest_path.parent.joinpath(*relative.parts)))

    if relative.parts and relative.parts[0] == config.package_source_dir:
        return root.joinpath(*relative.parts)

    if config.bare_imports == "manifest" and manifest_path is not None:
        return Path(os.path.normpath(manifest_path.parent.joinpath(*relative.parts)))
    return source_dir.joinpath(*relative.parts)


class WidgetPathResolver:
    """Maps widget names to files by scanning manifest imports.

    Nothing is cached here: each call re-reads the manifests so edits are
    visible as soon as they reach disk.
    """

    def __init__(self, locator: ManifestLocator, config: AppConfig | None = None) -> None:
        self.locator = locator
        self.config = config or locator.config

    def resolve_entity_path(self, entity_name: str) -> Optional[Path]:
        return self.explain(entity_name).path

    def explain(self, entity_name: str) -> ResolutionResult:
        """Resolve ``entity_name`` and report why the lookup ended the way it did."""
        key = to_snake_case(entity_name)
        result = ResolutionResult(entity=entity_name, key=key, status=ResolutionStatus.NO_MATCH)

        if not key:
            return result

        root = self.locator.get_project_root()
        if root is None:
            result.status = ResolutionStatus.NO_PROJECT_ROOT
            return result

        manifests = self.locator.manifest_files()
        if not manifests:
            LOGGER.debug("No manifest available to resolve %s", entity_name)
            result.status = ResolutionStatus.MANIFEST_NOT_FOUND
            return result

        contents: List[Tuple[Path, List[ImportDeclaration]]] = []
        for manifest in manifests:
            content = read_text(manifest)
            if content is None:
                continue
            result.manifests_scanned.append(manifest)
            declarations = parse_imports(content, self.config.source_extension, self.config.entity_suffix)
            contents.append((manifest, declarations))
            hit = self._first_match(entity_name, key, root, manifest, declarations, primary=True)
            if hit is not None:
                return self._resolved(result, *hit)

        if not contents:
            result.status = ResolutionStatus.MANIFEST_UNREADABLE
            return result

        if self.config.fallback_heuristics:
            for manifest, declarations in contents:
                hit = self._first_match(entity_name, key, root, manifest, declarations, primary=False)
                if hit is not None:
                    LOGGER.debug("Resolved %s through fallback heuristics", entity_name)
                    return self._resolved(result, *hit)

        LOGGER.debug("No import matched %s (key %r)", entity_name, key)
        return result

    def route_declarations(self) -> Dict[str, str]:
        """Map route names declared in the manifests to the widgets they build.

        The first manifest declaring a route wins, as for imports.
        """
        widgets: Dict[str, str] = {}
        for manifest in self.locator.manifest_files():
            content = read_text(manifest)
            if content is None:
                continue
            for declaration in parse_route_declarations(content, self.config.route_suffix):
                widgets.setdefault(declaration.route_name, declaration.widget_name)
        return widgets

    def resolve_in_content(
        self, entity_name: str, content: str, manifest_path: Optional[Path] = None
    ) -> Optional[Path]:
        """Resolve against manifest text supplied by the caller."""
        root = self.locator.get_project_root()
        key = to_snake_case(entity_name)
        if root is None or not key:
            return None
        declarations = parse_imports(content, self.config.source_extension, self.config.entity_suffix)
        hit = self._first_match(entity_name, key, root, manifest_path, declarations, primary=True)
        if hit is None and self.config.fallback_heuristics:
            hit = self._first_match(entity_name, key, root, manifest_path, declarations, primary=False)
        return Path(os.path.abspath(hit[0])) if hit is not None else None

    def _first_match(
        self,
        entity_name: str,
        key: str,
        root: Path,
        manifest: Optional[Path],
        declarations: Iterable[ImportDeclaration],
        *,
        primary: bool,
    ) -> Optional[Tuple[Path, str]]:
        for declaration in declarations:
            if primary:
                if key not in declaration.specifier:
                    continue
            elif not self._loosely_matches(entity_name, declaration):
                continue

            candidate = import_to_path(declaration.specifier, root, manifest, self.config)
            if candidate is None:
                LOGGER.debug("Skipping unclassified import %s", declaration.specifier)
                continue
            if candidate.exists():
                return candidate, declaration.specifier
            LOGGER.debug("Import %s points to missing file %s", declaration.specifier, candidate)
        return None

    def _loosely_matches(self, entity_name: str, declaration: ImportDeclaration) -> bool:
        if declaration.entity == entity_name:
            return True
        stem = PurePosixPath(declaration.specifier).name
        stem = stem[: -len(self.config.source_extension)] if stem.endswith(self.config.source_extension) else stem
        stem = stem.lower()
        short_key = to_snake_case(strip_suffix(entity_name, self.config.entity_suffix))
        if not short_key or not stem:
            return False
        return short_key in stem or stem in short_key

    @staticmethod
    def _resolved(result: ResolutionResult, path: Path, specifier: str) -> ResolutionResult:
        result.path = Path(os.path.abspath(path))
        result.specifier = specifier
        result.status = ResolutionStatus.RESOLVED
        return result

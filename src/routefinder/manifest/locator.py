"""Discovery of generated route manifests inside a project."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from routefinder.config import AppConfig
from routefinder.utils.files import iter_named_files

LOGGER = logging.getLogger(__name__)


class ManifestLocator:
    """Finds ``routes.gr.dart`` style manifests and caches the primary one.

    The cached path is dropped when it disappears from disk or when
    :meth:`invalidate` / :meth:`refresh` is called. Nothing is watched.
    """

    def __init__(self, roots: Sequence[Path] = (), config: AppConfig | None = None) -> None:
        self.roots = [Path(root) for root in roots]
        self.config = config or AppConfig()
        self._cached_path: Optional[Path] = None
        self._indexed: List[Path] = []

    @property
    def indexed_files(self) -> List[Path]:
        return list(self._indexed)

    def get_project_root(self) -> Optional[Path]:
        return self.roots[0] if self.roots else None

    def index_manifest_files(self) -> List[Path]:
        """Search the project tree for manifest files, replacing the indexed set."""
        root = self.get_project_root()
        if root is None or not root.is_dir():
            self._indexed = []
            return []

        # Conventional locations first; the walk only fills the remaining cap.
        found: List[Path] = [
            path for path in self._conventional(root) if path.is_file()
        ][: self.config.max_results]
        try:
            for path in iter_named_files(
                root, self.config.manifest_filename, excluded_dirs=self.config.excluded_dirs
            ):
                if len(found) >= self.config.max_results:
                    LOGGER.debug("Manifest search capped at %d results", self.config.max_results)
                    break
                if path not in found:
                    found.append(path)
        except OSError as exc:
            LOGGER.warning("Manifest search under %s failed: %s", root, exc)
            self._indexed = []
            return []

        self._indexed = found
        LOGGER.debug("Indexed %d manifest file(s) under %s", len(self._indexed), root)
        return list(self._indexed)

    def _conventional(self, root: Path) -> List[Path]:
        return [root / rel for rel in self.config.manifest_locations]

    def find_manifest_path(self) -> Optional[Path]:
        """Return the primary manifest, probing conventional locations if needed."""
        if self._cached_path is not None and self._cached_path.exists():
            return self._cached_path

        self._cached_path = None
        root = self.get_project_root()
        if root is None:
            return None

        for indexed in self._indexed:
            if indexed.exists():
                self._cached_path = indexed
                return indexed

        for candidate in self._conventional(root):
            if candidate.exists():
                LOGGER.debug("Found manifest at %s", candidate)
                self._cached_path = candidate
                return candidate

        LOGGER.debug("No manifest found under %s", root)
        return None

    def manifest_files(self) -> List[Path]:
        """Manifests to scan: the indexed set, else the located manifest."""
        if self._indexed:
            return list(self._indexed)
        located = self.find_manifest_path()
        return [located] if located is not None else []

    def locate_manifests(self) -> List[Path]:
        """Re-index and return every known manifest path."""
        self.invalidate()
        indexed = self.index_manifest_files()
        if indexed:
            return indexed
        located = self.find_manifest_path()
        return [located] if located is not None else []

    def invalidate(self) -> None:
        self._cached_path = None

    def refresh(self) -> List[Path]:
        LOGGER.info("Refreshing manifest locations")
        return self.locate_manifests()

"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

from routefinder.config import AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.root is None
        assert config.manifest_filename == "routes.gr.dart"
        assert config.default_manifest_path == "lib/routes.gr.dart"
        assert config.max_results == 50
        assert config.source_extension == ".dart"
        assert config.bare_imports == "lib"
        assert config.route_suffix == "Route"
        assert config.entity_suffix == "Screen"
        assert config.fallback_heuristics is False
        assert {"node_modules", ".dart_tool", "build", ".git"} <= config.excluded_dirs

    def test_manifest_locations_order(self) -> None:
        """Should list the default location before the alternates."""
        config = AppConfig()

        assert config.manifest_locations == (
            "lib/routes.gr.dart",
            "routes.gr.dart",
            "lib/generated/routes.gr.dart",
            "lib/app/routes.gr.dart",
        )

    def test_from_replace_in_route_name(self) -> None:
        """Should parse the entity and route suffixes."""
        config = AppConfig.from_replace_in_route_name("Page,Path")

        assert config.entity_suffix == "Page"
        assert config.route_suffix == "Path"

    def test_from_replace_in_route_name_partial(self) -> None:
        """Should keep defaults for missing parts."""
        config = AppConfig.from_replace_in_route_name("View", max_results=10)

        assert config.entity_suffix == "View"
        assert config.route_suffix == "Route"
        assert config.max_results == 10

    def test_resolve_root_none(self) -> None:
        """Should return None when no root is configured."""
        assert AppConfig().resolve_root(Path("/base")) is None

    def test_resolve_root_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(root=Path("/projects/app"))

        assert config.resolve_root(Path("/elsewhere")) == Path("/projects/app")

    def test_resolve_root_relative_with_base(self) -> None:
        """Should resolve relative path against base_dir."""
        config = AppConfig(root=Path("apps/mobile"))

        assert config.resolve_root(Path("/work")) == Path("/work/apps/mobile")

    def test_resolve_root_relative_no_base(self) -> None:
        """Should return relative path when no base_dir provided."""
        config = AppConfig(root=Path("apps/mobile"))

        assert config.resolve_root() == Path("apps/mobile")

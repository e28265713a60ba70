"""Tests for route token scanning and declaration lookup."""

from __future__ import annotations

from pathlib import Path

from routefinder.manifest.locator import ManifestLocator
from routefinder.navigation import (
    collect_route_definitions,
    find_entity_declaration,
    find_route_tokens,
    route_to_entity_name,
)
from routefinder.resolver import WidgetPathResolver

from conftest import write_file


class TestRouteToEntityName:
    """Test route_to_entity_name function."""

    def test_default_suffixes(self) -> None:
        assert route_to_entity_name("HomeRoute") == "HomeScreen"
        assert route_to_entity_name("ProfileDetailRoute") == "ProfileDetailScreen"

    def test_custom_suffixes(self) -> None:
        assert route_to_entity_name("HomePath", "Path", "Page") == "HomePage"

    def test_only_trailing_suffix_replaced(self) -> None:
        assert route_to_entity_name("RouteListRoute") == "RouteListScreen"

    def test_unrelated_name(self) -> None:
        assert route_to_entity_name("HomeWidget") == "HomeWidget"


class TestFindRouteTokens:
    """Test find_route_tokens function."""

    def test_tokens_with_positions(self) -> None:
        text = "context.router.push(const HomeRoute());\nAutoRoute(page: ProfileRoute.page)"

        tokens = find_route_tokens(text)

        assert [t.route_name for t in tokens] == ["HomeRoute", "ProfileRoute"]
        assert [t.widget_name for t in tokens] == ["HomeScreen", "ProfileScreen"]
        assert (tokens[0].line, tokens[0].column) == (1, 26)
        assert (tokens[1].line, tokens[1].column) == (2, 16)
        assert text[tokens[1].offset :].startswith("ProfileRoute")

    def test_skips_framework_names(self) -> None:
        """Should ignore AutoRoute and identifiers that only start with Route."""
        assert find_route_tokens("AutoRoute RouteObserver Route") == []

    def test_repeated_tokens(self) -> None:
        assert len(find_route_tokens("HomeRoute(); HomeRoute();")) == 2

    def test_declared_widget_preferred(self) -> None:
        """Should use the widget a manifest declares for the route."""
        tokens = find_route_tokens("ProfileRoute(); HomeRoute();", declared={"ProfileRoute": "UserPage"})

        assert [t.widget_name for t in tokens] == ["UserPage", "HomeScreen"]


class TestCollectRouteDefinitions:
    """Test collect_route_definitions function."""

    def test_resolved_and_dropped(self, project: Path, manifest: Path, home_screen: Path) -> None:
        """Should keep resolvable tokens only."""
        resolver = WidgetPathResolver(ManifestLocator([project]))
        text = "router.push(HomeRoute());\nrouter.push(MissingRoute());\n"

        definitions = collect_route_definitions(text, resolver)

        assert len(definitions) == 1
        assert definitions[0].route_name == "HomeRoute"
        assert definitions[0].widget_name == "HomeScreen"
        assert definitions[0].file_path == home_screen
        assert definitions[0].line_number == 1

    def test_declared_widget(self, project: Path) -> None:
        """Should resolve the widget named by an AutoRoute declaration."""
        user_page = write_file(
            project / "lib" / "user" / "user_page.dart", "class UserPage extends StatelessWidget {}\n"
        )
        write_file(
            project / "lib" / "routes.gr.dart",
            "import 'package:app/user/user_page.dart' as _i1;\n"
            "\n"
            "static const ProfileRoute = AutoRoute<_i1.UserPage>();\n",
        )
        resolver = WidgetPathResolver(ManifestLocator([project]))

        (definition,) = collect_route_definitions("router.push(ProfileRoute());", resolver)

        assert definition.widget_name == "UserPage"
        assert definition.file_path == user_page

    def test_without_manifest(self, project: Path) -> None:
        resolver = WidgetPathResolver(ManifestLocator([project]))

        assert collect_route_definitions("HomeRoute()", resolver) == []


class TestFindEntityDeclaration:
    """Test find_entity_declaration function."""

    def test_finds_class(self, home_screen: Path) -> None:
        location = find_entity_declaration(home_screen, "HomeScreen")

        assert location is not None
        assert location.path == home_screen
        assert (location.line, location.column) == (3, 0)

    def test_exact_name_only(self, tmp_path: Path) -> None:
        """Should not match a class whose name only starts with the entity."""
        path = write_file(tmp_path / "a.dart", "class HomeScreenBody extends StatelessWidget {}\n")

        assert find_entity_declaration(path, "HomeScreen") is None

    def test_missing_file(self, tmp_path: Path) -> None:
        assert find_entity_declaration(tmp_path / "missing.dart", "HomeScreen") is None

"""Route token discovery and jump targets for editor integrations."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Mapping, Optional

from routefinder.config import DEFAULT_ENTITY_SUFFIX, DEFAULT_ROUTE_SUFFIX
from routefinder.models import DeclarationLocation, RouteDefinition, RouteToken
from routefinder.resolver import WidgetPathResolver
from routefinder.utils.files import read_text
from routefinder.utils.text import line_and_column

LOGGER = logging.getLogger(__name__)

# Base class exported by the routing package itself, never a generated route.
FRAMEWORK_ROUTE_NAMES = frozenset({"AutoRoute"})


def route_to_entity_name(
    route_name: str,
    route_suffix: str = DEFAULT_ROUTE_SUFFIX,
    entity_suffix: str = DEFAULT_ENTITY_SUFFIX,
) -> str:
    """Map ``HomeRoute`` to ``HomeScreen``."""
    if route_suffix and route_name.endswith(route_suffix):
        return route_name[: -len(route_suffix)] + entity_suffix
    return route_name


def find_route_tokens(
    text: str,
    route_suffix: str = DEFAULT_ROUTE_SUFFIX,
    entity_suffix: str = DEFAULT_ENTITY_SUFFIX,
    declared: Optional[Mapping[str, str]] = None,
) -> List[RouteToken]:
    """Find route references in ``text``.

    A widget named by a manifest declaration in ``declared`` takes precedence
    over the one derived by swapping suffixes.
    """
    declared = declared or {}
    pattern = re.compile(rf"\b(\w+{re.escape(route_suffix)})\b")
    tokens: List[RouteToken] = []
    for match in pattern.finditer(text):
        route_name = match.group(1)
        if route_name in FRAMEWORK_ROUTE_NAMES:
            continue
        line, column = line_and_column(text, match.start())
        tokens.append(
            RouteToken(
                route_name=route_name,
                widget_name=declared.get(route_name)
                or route_to_entity_name(route_name, route_suffix, entity_suffix),
                offset=match.start(),
                line=line,
                column=column,
            )
        )
    return tokens


def collect_route_definitions(text: str, resolver: WidgetPathResolver) -> List[RouteDefinition]:
    """Resolve every route token in ``text``; unresolved tokens are dropped.

    Each token triggers a fresh resolution, so the cost grows with the
    number of tokens times the manifest size.
    """
    config = resolver.config
    definitions: List[RouteDefinition] = []
    declared = resolver.route_declarations()
    for token in find_route_tokens(text, config.route_suffix, config.entity_suffix, declared):
        path = resolver.resolve_entity_path(token.widget_name)
        if path is None:
            continue
        definitions.append(
            RouteDefinition(
                route_name=token.route_name,
                widget_name=token.widget_name,
                file_path=path,
                line_number=token.line,
            )
        )
    LOGGER.debug("Resolved %d route reference(s)", len(definitions))
    return definitions


def find_entity_declaration(path: Path, entity_name: str) -> Optional[DeclarationLocation]:
    """Locate ``class <entity_name> extends ...`` inside ``path``."""
    content = read_text(path)
    if content is None:
        return None
    pattern = re.compile(rf"class\s+{re.escape(entity_name)}\s+extends\s+\w+")
    match = pattern.search(content)
    if match is None:
        return None
    line, column = line_and_column(content, match.start())
    return DeclarationLocation(path=path, line=line, column=column)

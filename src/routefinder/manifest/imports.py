"""Import declaration scanning for generated route manifests."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Pattern

from routefinder.config import DEFAULT_ENTITY_SUFFIX, DEFAULT_ROUTE_SUFFIX
from routefinder.models import ImportDeclaration, RouteDeclaration

_ENTITY_TOKEN = re.compile(r"[A-Za-z_]\w*")


@lru_cache(maxsize=8)
def _import_pattern(extension: str) -> Pattern[str]:
    # import 'path.dart' [deferred] [as alias] [show/hide ...] [;] [// comment]
    return re.compile(
        r"(?<![\w.$])import\s+(?P<quote>['\"])(?P<specifier>[^'\"\n]*"
        + re.escape(extension)
        + r")(?P=quote)"
        r"(?:\s+deferred)?"
        r"(?:\s+as\s+(?P<alias>[A-Za-z_$][\w$]*))?"
        r"[^;/\n]*;?"
        r"[ \t]*(?://(?P<comment>[^\n]*))?"
    )


def _comment_entity(comment: str | None, entity_suffix: str) -> str | None:
    """Pick the first comment word ending in ``entity_suffix``, else the last word."""
    if not comment:
        return None
    tokens = _ENTITY_TOKEN.findall(comment)
    if not tokens:
        return None
    if entity_suffix:
        for token in tokens:
            if token.endswith(entity_suffix):
                return token
    return tokens[-1]


def parse_imports(
    content: str,
    extension: str = ".dart",
    entity_suffix: str = DEFAULT_ENTITY_SUFFIX,
) -> List[ImportDeclaration]:
    """Extract import declarations from manifest text in order of appearance.

    The scan is line-oriented and tolerant: anything that is not an import
    statement with a quoted specifier ending in ``extension`` is ignored.
    """
    declarations: List[ImportDeclaration] = []
    for match in _import_pattern(extension).finditer(content):
        declarations.append(
            ImportDeclaration(
                specifier=match.group("specifier"),
                line=content.count("\n", 0, match.start()) + 1,
                alias=match.group("alias"),
                entity=_comment_entity(match.group("comment"), entity_suffix),
            )
        )
    return declarations


@lru_cache(maxsize=8)
def _route_pattern(route_suffix: str) -> Pattern[str]:
    # [static const] HomeRoute = AutoRoute<[_i1.]HomeScreen>(...)
    return re.compile(rf"\b(?P<route>\w+{re.escape(route_suffix)})\s*=\s*AutoRoute<(?:\w+\.)?(?P<widget>\w+)>")


def parse_route_declarations(
    content: str, route_suffix: str = DEFAULT_ROUTE_SUFFIX
) -> List[RouteDeclaration]:
    """Extract ``XxxRoute = AutoRoute<Widget>`` declarations in order of appearance."""
    return [
        RouteDeclaration(
            route_name=match.group("route"),
            widget_name=match.group("widget"),
            line=content.count("\n", 0, match.start()) + 1,
        )
        for match in _route_pattern(route_suffix).finditer(content)
    ]

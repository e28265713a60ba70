"""Text helpers for identifier normalization."""

from __future__ import annotations

import re

_UPPER = re.compile(r"([A-Z])")


def to_snake_case(name: str) -> str:
    """Convert a camel or Pascal case identifier to ``snake_case``.

    ``ProfileDetailScreen`` becomes ``profile_detail_screen``. Only one
    leading underscore is removed, so the conversion is total and maps the
    empty string to itself.
    """
    if not name:
        return name
    snake = _UPPER.sub(r"_\1", name).lower()
    return snake[1:] if snake.startswith("_") else snake


def strip_suffix(name: str, suffix: str) -> str:
    if suffix and name.endswith(suffix) and name != suffix:
        return name[: -len(suffix)]
    return name


def line_and_column(text: str, offset: int) -> tuple[int, int]:
    """Return the 1-based line and 0-based column of ``offset`` in ``text``."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1)
    return line, column

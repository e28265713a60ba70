"""Shared fixtures: a minimal Flutter project layout on disk."""

from __future__ import annotations

from pathlib import Path

import pytest


def write_file(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with an empty ``lib`` directory."""
    root = tmp_path / "app"
    (root / "lib").mkdir(parents=True)
    return root


@pytest.fixture
def home_screen(project: Path) -> Path:
    return write_file(
        project / "lib" / "features" / "home" / "home_screen.dart",
        "import 'package:flutter/material.dart';\n\nclass HomeScreen extends StatelessWidget {}\n",
    )


@pytest.fixture
def manifest(project: Path, home_screen: Path) -> Path:
    """Default manifest importing the home screen through a package URI."""
    return write_file(
        project / "lib" / "routes.gr.dart",
        "import 'package:auto_route/auto_route.dart' as _i1;\n"
        "import 'package:app/features/home/home_screen.dart' as _i2;\n"
        "\n"
        "class HomeRoute extends _i1.PageRouteInfo<void> {}\n",
    )

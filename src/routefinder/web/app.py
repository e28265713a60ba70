"""FastAPI application exposing route resolution to editor integrations."""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import replace
from pathlib import Path
from typing import Any, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from routefinder.config import AppConfig
from routefinder.manifest.locator import ManifestLocator
from routefinder.navigation import collect_route_definitions
from routefinder.resolver import WidgetPathResolver

LOGGER = logging.getLogger(__name__)

# Locators kept alive between requests; least recently used roots are dropped.
MAX_LOCATORS = 32

app = FastAPI(title="RouteFinder", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.locators = OrderedDict()


class ManifestsPayload(BaseModel):
    root: Path
    refresh: bool = False


class ResolvePayload(BaseModel):
    root: Path
    entity: str
    fuzzy: bool = False


class LensesPayload(BaseModel):
    root: Path
    text: str
    fuzzy: bool = False


class RefreshPayload(BaseModel):
    root: Path


def _get_locator(request: Request, root: Path) -> ManifestLocator:
    """Return the locator kept for ``root``, creating and indexing it on first use."""
    resolved = root.expanduser()
    locators: "OrderedDict[Path, ManifestLocator]" = request.app.state.locators
    locator = locators.get(resolved)
    if locator is not None:
        locators.move_to_end(resolved)
        return locator

    locator = ManifestLocator([resolved], AppConfig(root=resolved))
    locator.index_manifest_files()
    locators[resolved] = locator
    while len(locators) > MAX_LOCATORS:
        evicted, _ = locators.popitem(last=False)
        LOGGER.debug("Dropped cached locator for %s", evicted)
    return locator


def _resolver(locator: ManifestLocator, fuzzy: bool) -> WidgetPathResolver:
    config = locator.config
    if fuzzy != config.fallback_heuristics:
        config = replace(config, fallback_heuristics=fuzzy)
    return WidgetPathResolver(locator, config)


def _require_root(root: Path) -> None:
    if not root.expanduser().is_dir():
        raise HTTPException(status_code=404, detail=f"Project root not found: {root}")


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/manifests")
async def list_manifests(payload: ManifestsPayload, request: Request) -> dict[str, List[str]]:
    _require_root(payload.root)
    locator = _get_locator(request, payload.root)
    manifests = locator.locate_manifests() if payload.refresh else locator.manifest_files()
    return {"manifests": [str(path) for path in manifests]}


@app.post("/refresh")
async def refresh(payload: RefreshPayload, request: Request) -> dict[str, List[str]]:
    _require_root(payload.root)
    locator = _get_locator(request, payload.root)
    manifests = locator.refresh()
    return {"manifests": [str(path) for path in manifests]}


@app.post("/resolve")
async def resolve_entity(payload: ResolvePayload, request: Request) -> dict[str, str]:
    entity = payload.entity.strip()
    if not entity:
        raise HTTPException(status_code=400, detail="Empty entity name")

    _require_root(payload.root)
    locator = _get_locator(request, payload.root)
    result = _resolver(locator, payload.fuzzy).explain(entity)
    if result.path is None:
        raise HTTPException(status_code=404, detail=result.status.describe(entity))
    return {"entity": entity, "path": str(result.path), "status": result.status.value}


@app.post("/lenses")
async def lenses(payload: LensesPayload, request: Request) -> dict[str, List[dict[str, Any]]]:
    _require_root(payload.root)
    locator = _get_locator(request, payload.root)
    definitions = collect_route_definitions(payload.text, _resolver(locator, payload.fuzzy))
    return {
        "lenses": [
            {
                "route_name": definition.route_name,
                "widget_name": definition.widget_name,
                "file_path": str(definition.file_path),
                "line": definition.line_number,
            }
            for definition in definitions
        ]
    }

"""Plugin discovery: manifests and API blueprints."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Any, Iterator, Mapping

from flask import Blueprint, Flask

PLUGIN_PACKAGE = "plugins"


def discover_plugins(package: str = PLUGIN_PACKAGE) -> Iterator[str]:
    """Yield dotted import paths of every plugin package."""

    package_path = Path(__file__).resolve().parent.parent / package
    if not package_path.exists():
        return
    for module_info in pkgutil.iter_modules([str(package_path)]):
        if module_info.ispkg:
            yield f"{package}.{module_info.name}"


def load_manifests(plugin_settings: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
    """Collect plugin manifests, applying ``summary`` overrides from configuration."""

    plugin_settings = plugin_settings or {}
    manifests: list[dict[str, Any]] = []
    for dotted in discover_plugins():
        module = importlib.import_module(dotted)
        manifest = getattr(module, "manifest", None)
        if not manifest:
            continue
        entry = dict(manifest)
        overrides = plugin_settings.get(entry.get("blueprint", ""), {}) or {}
        if overrides.get("summary"):
            entry["summary"] = overrides["summary"]
        manifests.append(entry)
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def _plugin_blueprints(dotted: str) -> list[Blueprint]:
    module = importlib.import_module(f"{dotted}.api")
    module_blueprints = getattr(module, "blueprints", None)
    if module_blueprints:
        return list(module_blueprints)
    blueprint = getattr(module, "bp", None)
    return [blueprint] if blueprint is not None else []


def register_plugin_blueprints(app: Flask) -> None:
    for dotted in discover_plugins():
        for bp in _plugin_blueprints(dotted):
            app.register_blueprint(bp)


__all__ = ["PLUGIN_PACKAGE", "discover_plugins", "load_manifests", "register_plugin_blueprints"]

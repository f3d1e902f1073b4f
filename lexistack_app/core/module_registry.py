"""Utilities for declaratively registering application modules.

Each blueprint-backed module is described with a small piece of metadata so
registration stays in one place instead of being spread across the factory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a blueprint-backed module is registered with the app."""

    import_path: str
    attribute: str
    url_prefix: Optional[str] = None
    version: str = "1.0"

    def load_blueprint(self) -> Blueprint:
        """Import and return the blueprint described by this definition."""

        module = import_string(self.import_path)
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> List[str]:
    """Register every module with the Flask app and return the blueprint names.

    A blueprint name that is already registered raises ``ValueError`` so two
    definitions cannot silently shadow each other.
    """

    registered: List[str] = []
    for module in modules:
        blueprint = module.load_blueprint()
        if blueprint.name in app.blueprints:
            raise ValueError("Blueprint '%s' is already registered" % blueprint.name)
        app.register_blueprint(blueprint, url_prefix=module.url_prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or "<root>",
        )
        registered.append(blueprint.name)
    return registered


def register_default_modules(app: Flask) -> List[str]:
    """Convenience helper that registers the built-in LexiStack modules."""

    return register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("lexistack_app.modules.csv_tools", "csv_tools_bp", url_prefix="/csv", version="1.0"),
)

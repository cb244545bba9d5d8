"""Resolve objects from dotted import paths."""

from __future__ import annotations

import importlib
from typing import Any


def import_string(path: str) -> Any:
    """Import ``package.module.Attribute`` and return the attribute.

    Raises ImportError if the module or the attribute does not exist.
    """
    module_path, _, attr = path.rpartition(".")
    if not module_path:
        raise ImportError(f"`{path}` is not a dotted import path")
    module = importlib.import_module(module_path)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ImportError(f"Module `{module_path}` has no attribute `{attr}`") from exc

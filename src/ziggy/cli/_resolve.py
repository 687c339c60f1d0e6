"""Import resolution — resolves ``"module:attribute"`` strings.

Shared by ``ziggy generate`` and ``ziggy routes`` to locate the route
source and, optionally, the ziggy configuration.
"""

import importlib
from collections.abc import Mapping
from typing import Any

from ziggy.config import ZiggyConfig
from ziggy.protocols import RouteSource


def _import(import_string: str, default_attr: str) -> Any:
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    return getattr(module, attr_name or default_attr)


def _as_router(obj: Any) -> RouteSource | None:
    if isinstance(obj, RouteSource):
        return obj
    nested = getattr(obj, "router", None)
    if isinstance(nested, RouteSource):
        return nested
    return None


def resolve_router(import_string: str) -> RouteSource:
    """Resolve an import string to a route source.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"router"``.  The resolved object may be a
    route source, an object with a ``router`` attribute (such as an app),
    or a zero-argument factory returning either.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If nothing resolves to a route source.
    """
    obj = _import(import_string, "router")

    router = _as_router(obj)
    if router is None and callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc
        router = _as_router(obj)

    if router is None:
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a route source"
        raise TypeError(msg)
    return router


def resolve_config(import_string: str) -> ZiggyConfig:
    """Resolve an import string to a ``ZiggyConfig``.

    The attribute defaults to ``"ziggy"``.  Plain mappings are converted
    with ``ZiggyConfig.from_mapping``.
    """
    obj = _import(import_string, "ziggy")
    if isinstance(obj, ZiggyConfig):
        return obj
    if isinstance(obj, Mapping):
        return ZiggyConfig.from_mapping(obj)
    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a ZiggyConfig"
    raise TypeError(msg)

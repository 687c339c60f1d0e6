"""Ziggy — named-route export for client-side URL generation.

Reads the named routes of an application's router, filters them by name
pattern, works out which entity field each bound parameter uses, and
produces a JSON route table that client-side URL builders consume.

Basic usage::

    from ziggy import Router, Ziggy

    router = Router()

    @router.route("/posts/{post}", name="posts.show")
    def show(post: Post): ...

    Ziggy(router, url="https://example.com").to_json()

Filtering::

    from ziggy import ZiggyConfig
    config = ZiggyConfig(except_=("admin.*",), groups={"admin": ("admin.*",)})
    Ziggy(router, url=..., config=config, group="admin")
"""

import importlib

__version__ = "0.1.0.dev0"

# Public name -> defining module, imported on first access
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "ziggy.errors",
    "FilterContext": "ziggy.filters",
    "RouteDescriptor": "ziggy.snapshot",
    "Router": "ziggy.routing.router",
    "StaticUrlResolver": "ziggy.protocols",
    "UnresolvableParameterType": "ziggy.errors",
    "UrlRoutable": "ziggy.binding",
    "Ziggy": "ziggy.ziggy",
    "ZiggyConfig": "ziggy.config",
    "ZiggyError": "ziggy.errors",
    "ZiggySnapshot": "ziggy.serializer",
    "apply_filters": "ziggy.filters",
    "build_snapshot": "ziggy.snapshot",
    "filter_routes": "ziggy.filters",
    "resolve_bindings": "ziggy.binding",
    "serialize": "ziggy.serializer",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import ziggy`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)

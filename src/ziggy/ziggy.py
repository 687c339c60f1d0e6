"""The Ziggy export pipeline.

Builds a name-keyed snapshot of a router's routes when constructed, then
filters it and resolves route-model bindings when the result is asked for.

Usage::

    from ziggy import Ziggy, ZiggyConfig

    config = ZiggyConfig(groups={"admin": ("admin.*",)})
    ziggy = Ziggy(router, group="admin", url="https://example.com", config=config)
    ziggy.to_json()

Instances are request-scoped: create one per export. Nothing is cached
between instances and the router is only read.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from ziggy.binding import resolve_bindings
from ziggy.config import FilterSpec, ZiggyConfig
from ziggy.errors import ConfigurationError
from ziggy.filters import FilterContext, apply_filters, filter_routes
from ziggy.protocols import RouteSource, UrlResolver
from ziggy.serializer import ZiggySnapshot, serialize, to_dict, to_json, to_wire
from ziggy.snapshot import RESERVED_PREFIXES, RouteDescriptor, build_snapshot


class Ziggy:
    """A route export for one router, group, and base URL."""

    __slots__ = ("_defaults", "_routes", "config", "group", "url")

    def __init__(
        self,
        router: RouteSource,
        *,
        group: str | Sequence[str] | None = None,
        url: str | None = None,
        url_resolver: UrlResolver | None = None,
        config: ZiggyConfig | None = None,
    ) -> None:
        self.config: ZiggyConfig = config or ZiggyConfig()
        self.group = group
        self.url: str = _base_url(url, url_resolver, self.config).rstrip("/")
        self._defaults: dict[str, Any] = _default_parameters(url_resolver)
        self._routes: dict[str, RouteDescriptor] = build_snapshot(
            router.list_routes(),
            RESERVED_PREFIXES + tuple(self.config.skip_prefixes),
        )

    @property
    def routes(self) -> Mapping[str, RouteDescriptor]:
        """The named routes before group/config filtering."""
        return MappingProxyType(self._routes)

    def filter(self, patterns: FilterSpec, include: bool = True) -> Ziggy:
        """Return a copy keeping (or, with ``include=False``, dropping) matching routes.

        Chainable::

            ziggy.filter("admin.*").filter("admin.debug.*", include=False)
        """
        clone = object.__new__(Ziggy)
        clone.config = self.config
        clone.group = self.group
        clone.url = self.url
        clone._defaults = dict(self._defaults)
        clone._routes = filter_routes(self._routes, patterns, include)
        return clone

    def snapshot(self) -> ZiggySnapshot:
        """Filter, resolve bindings, and assemble the snapshot."""
        context = FilterContext.from_config(self.config, self.group)
        routes = resolve_bindings(apply_filters(self._routes, context))
        return serialize(self.url, self._defaults, routes)

    def to_dict(self) -> dict[str, Any]:
        return to_dict(self.snapshot())

    def to_json(self, **json_kwargs: Any) -> str:
        return to_json(self.snapshot(), **json_kwargs)

    def to_wire(self) -> bytes:
        return to_wire(self.snapshot())

    def __repr__(self) -> str:
        return f"Ziggy(url={self.url!r}, group={self.group!r}, routes={len(self._routes)})"


def _base_url(url: str | None, resolver: UrlResolver | None, config: ZiggyConfig) -> str:
    if url is not None:
        return url
    if resolver is not None:
        return resolver.current_base_url()
    if config.url is not None:
        return config.url
    msg = "No base URL: pass url=, a url_resolver, or set ZiggyConfig(url=...)."
    raise ConfigurationError(msg)


def _default_parameters(resolver: UrlResolver | None) -> dict[str, Any]:
    getter = getattr(resolver, "default_parameters", None)
    if getter is None:
        return {}
    return dict(getter() or {})

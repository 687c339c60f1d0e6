"""Route snapshot builder.

Turns the routes reported by a route source into a name-keyed mapping of
immutable ``RouteDescriptor`` values. Unnamed routes and routes generated
by debugging tooling are left out.
"""

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ziggy.routing.route import Parameter, RawRoute

# Route name prefixes owned by debugging / auto-generation tooling
RESERVED_PREFIXES: tuple[str, ...] = ("debugbar.", "generated::")


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """The exported description of a single named route.

    ``parameters`` and ``binding_fields`` feed the binding resolver and are
    never serialized. ``bindings`` is empty until bindings are resolved.
    """

    name: str
    uri: str
    methods: tuple[str, ...]
    domain: str | None = None
    parameters: tuple[Parameter, ...] = field(default=(), repr=False, compare=False)
    binding_fields: Mapping[str, str] = field(default_factory=dict, compare=False)
    bindings: Mapping[str, str] = field(default_factory=dict)

    def with_bindings(self, bindings: Mapping[str, str]) -> RouteDescriptor:
        """Return a copy of this descriptor with *bindings* attached."""
        return dataclasses.replace(self, bindings=MappingProxyType(dict(bindings)))


def is_exportable(name: str | None, skip_prefixes: Iterable[str] = RESERVED_PREFIXES) -> bool:
    """Return True if a route called *name* belongs in a snapshot."""
    if not name:
        return False
    return not name.startswith(tuple(skip_prefixes))


def describe(name: str, route: RawRoute) -> RouteDescriptor:
    """Build the descriptor exported under *name* for *route*."""
    return RouteDescriptor(
        name=name,
        uri=route.uri,
        methods=tuple(sorted(set(route.methods))),
        domain=route.domain or None,
        parameters=tuple(route.parameters),
        binding_fields=MappingProxyType(dict(route.binding_fields)),
    )


def build_snapshot(
    routes: Iterable[RawRoute],
    skip_prefixes: Iterable[str] = RESERVED_PREFIXES,
) -> dict[str, RouteDescriptor]:
    """Return the exportable routes keyed by name, in source order.

    A later route with an already-seen name replaces the earlier one.
    Routers keep names unique, so this only matters for hand-built sources.
    """
    prefixes = tuple(skip_prefixes)
    registry: dict[str, RouteDescriptor] = {}
    for route in routes:
        if is_exportable(route.name, prefixes):
            descriptor = describe(route.name, route)
            registry[descriptor.name] = descriptor
    return registry

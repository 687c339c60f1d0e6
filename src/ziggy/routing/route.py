"""Route, Parameter and RawRoute frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/users``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    Typed:   ``/{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class Parameter:
    """A handler parameter as declared in its signature.

    ``annotation`` is left unevaluated when it is a string; ``namespace``
    holds the globals it should be resolved against.
    """

    name: str
    annotation: Any = None
    namespace: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created during app setup, frozen into the router at compile time.
    ``bindings`` declares scoped route-key fields per parameter, e.g.
    ``{"post": "slug"}`` for ``/users/{user}/posts/{post}``.
    """

    path: str
    handler: Callable[..., Any]
    methods: frozenset[str]
    name: str | None = None
    domain: str | None = None
    bindings: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RawRoute:
    """A route as reported by a route source.

    This is the shape ziggy consumes; any router can produce it.
    """

    uri: str
    methods: frozenset[str]
    name: str | None = None
    domain: str | None = None
    parameters: tuple[Parameter, ...] = ()
    binding_fields: Mapping[str, str] = field(default_factory=dict)

"""Named route registry.

Routes are registered during setup and frozen when the router compiles.
The router only records routes; ziggy reads them back through
``list_routes()`` to build its snapshot.
"""

import annotationlib
import inspect
from collections.abc import Callable, Mapping
from typing import Any

from ziggy.errors import ConfigurationError
from ziggy.routing.route import Parameter, PathSegment, RawRoute, Route


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/users"          -> [PathSegment("users")]
        "/users/{id}"     -> [PathSegment("users"), PathSegment("{id}", is_param=True, ...)]
        "/users/{id:int}" -> [PathSegment("{id:int}", is_param=True, param_type="int")]

    Raises ``ConfigurationError`` for ``<param>`` placeholders, which are
    easy to carry over from other frameworks and would otherwise register
    as literal segments.
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route path {path!r} uses <param> placeholders. "
                "Use {param} instead, e.g. '/users/{id}'."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


def template_uri(path: str) -> str:
    """Return the exported URI template for *path*.

    Converter suffixes are dropped so every placeholder reads ``{name}``::

        "/users/{user:int}/posts" -> "users/{user}/posts"
        "/"                        -> "/"
    """
    parts = [
        f"{{{seg.param_name}}}" if seg.is_param else seg.value
        for seg in parse_path(path)
    ]
    return "/".join(parts) or "/"


def signature_parameters(handler: Callable[..., Any]) -> tuple[Parameter, ...]:
    """Return the declared parameters of *handler*.

    Annotations are read without forcing evaluation, so a handler whose
    annotations name a missing type still yields its parameters; those
    annotations come back as forward references.
    """
    target = inspect.unwrap(handler)
    namespace = getattr(target, "__globals__", {})
    sig = inspect.signature(target, annotation_format=annotationlib.Format.FORWARDREF)
    params: list[Parameter] = []
    for param in sig.parameters.values():
        annotation = None if param.annotation is inspect.Parameter.empty else param.annotation
        params.append(Parameter(param.name, annotation, namespace))
    return tuple(params)


class Router:
    """Registry of application routes.

    Usage::

        router = Router()

        @router.route("/users/{user}", name="users.show")
        def show(user: User): ...

        router.add(Route("/", index, frozenset({"GET"}), name="home"))
        router.compile()
        router.list_routes()
    """

    __slots__ = ("_compiled", "_names", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._names: set[str] = set()
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        # Validates placeholder syntax
        parse_path(route.path)

        if route.name is not None:
            if route.name in self._names:
                msg = f"Duplicate route name {route.name!r} for path {route.path!r}."
                raise ConfigurationError(msg)
            self._names.add(route.name)

        self._routes.append(route)

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
        domain: str | None = None,
        bindings: Mapping[str, str] | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a route handler via decorator.

        Args:
            path: URL path pattern. Use ``{param}`` for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Route name. Only named routes are exported.
            domain: Optional domain the route is restricted to.
            bindings: Scoped route-key fields, e.g. ``{"post": "slug"}``.
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add(
                Route(
                    path=path,
                    handler=func,
                    methods=frozenset(m.upper() for m in methods or ["GET"]),
                    name=name,
                    domain=domain,
                    bindings=dict(bindings or {}),
                )
            )
            return func

        return decorator

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes, in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def list_routes(self) -> list[RawRoute]:
        """Describe every registered route for export."""
        return [
            RawRoute(
                uri=template_uri(route.path),
                methods=route.methods,
                name=route.name,
                domain=route.domain,
                parameters=signature_parameters(route.handler),
                binding_fields=route.bindings,
            )
            for route in self._routes
        ]

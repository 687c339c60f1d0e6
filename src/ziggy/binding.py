"""Route-model binding resolution.

A handler parameter annotated with a ``UrlRoutable`` subclass is bound
from its URL segment. Clients building URLs need to know which field of
the entity goes into that segment, so each exported route carries a
``bindings`` map of ``{parameter: field}``.

Usage::

    class Post(UrlRoutable):
        def route_key_name(self) -> str:
            return "slug"

    @router.route("/posts/{post}", name="posts.show")
    def show(post: Post): ...

    # -> "posts.show": {"uri": "posts/{post}", ..., "bindings": {"post": "slug"}}

Entities that keep the default route key are never instantiated; only
types that define their own ``route_key_name`` are constructed to ask.
"""

import annotationlib
import dataclasses
import logging
import types
import typing
from collections.abc import Mapping
from typing import Any, ClassVar

from ziggy.errors import UnresolvableParameterType
from ziggy.routing.route import Parameter
from ziggy.snapshot import RouteDescriptor

logger = logging.getLogger("ziggy.binding")

DEFAULT_ROUTE_KEY = "id"


class UrlRoutable:
    """Base class for entities that can be bound from a URL segment.

    Subclasses are classified when they are defined: a class whose
    ``route_key_name`` resolves to anything other than this default (its
    own, a parent's, or a mixin's) is marked with
    ``overrides_route_key = True``.
    """

    overrides_route_key: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.overrides_route_key = cls.route_key_name is not UrlRoutable.route_key_name

    def route_key_name(self) -> str:
        """The field used to find this entity from a URL segment."""
        return DEFAULT_ROUTE_KEY

    @classmethod
    def composite_binding_fields(cls) -> Mapping[str, str]:
        """Extra ``{parameter: field}`` bindings for scoped child routes."""
        return {}


def is_routable(annotation: Any) -> bool:
    """Return True if *annotation* is a ``UrlRoutable`` type."""
    return isinstance(annotation, type) and issubclass(annotation, UrlRoutable)


def _evaluate(parameter: Parameter) -> Any:
    annotation = parameter.annotation
    if isinstance(annotation, str):
        annotation = annotationlib.ForwardRef(annotation)
    if isinstance(annotation, annotationlib.ForwardRef):
        try:
            return annotation.evaluate(globals=dict(parameter.namespace))
        except (NameError, AttributeError, SyntaxError, TypeError) as exc:
            raise UnresolvableParameterType(
                parameter.name, parameter.annotation, reason=str(exc)
            ) from exc
    return annotation


def resolve_parameter_type(parameter: Parameter) -> type[UrlRoutable] | None:
    """Return the ``UrlRoutable`` type *parameter* binds to, if any.

    ``Post | None`` and ``Annotated[Post, ...]`` resolve to ``Post``.
    Returns None for unannotated or non-routable parameters.

    Raises ``UnresolvableParameterType`` when the annotation names a type
    that does not exist, names more than one routable type, or names
    ``UrlRoutable`` itself.
    """
    if parameter.annotation is None:
        return None

    annotation = _evaluate(parameter)
    if typing.get_origin(annotation) is typing.Annotated:
        annotation = typing.get_args(annotation)[0]

    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        candidates = [arg for arg in typing.get_args(annotation) if is_routable(arg)]
        if len(candidates) > 1:
            names = ", ".join(c.__name__ for c in candidates)
            raise UnresolvableParameterType(
                parameter.name, parameter.annotation, reason=f"ambiguous union of {names}"
            )
        annotation = candidates[0] if candidates else None

    if not is_routable(annotation):
        return None
    if annotation is UrlRoutable:
        raise UnresolvableParameterType(
            parameter.name, parameter.annotation, reason="UrlRoutable is not a concrete type"
        )
    return annotation


def route_key_for(model: type[UrlRoutable]) -> str:
    """Return the route key field for *model*.

    Only models that override ``route_key_name`` are instantiated.
    """
    if not model.overrides_route_key:
        return DEFAULT_ROUTE_KEY
    return model().route_key_name()


def route_bindings(route: RouteDescriptor) -> dict[str, str]:
    """Compute the BindingMap for a single route.

    Per-parameter route keys come first, then each model's composite
    fields, then the route's own scoped fields; later entries win.
    """
    bindings: dict[str, str] = {}
    composite: dict[str, str] = {}

    for parameter in route.parameters:
        try:
            model = resolve_parameter_type(parameter)
        except UnresolvableParameterType as exc:
            logger.warning("%s; skipping binding", dataclasses.replace(exc, route=route.name))
            continue
        if model is None:
            continue
        bindings[parameter.name] = route_key_for(model)
        composite.update(model.composite_binding_fields())

    bindings.update(composite)
    bindings.update(route.binding_fields)
    return bindings


def resolve_bindings(routes: Mapping[str, RouteDescriptor]) -> dict[str, RouteDescriptor]:
    """Attach a BindingMap to every route in *routes*."""
    return {name: route.with_bindings(route_bindings(route)) for name, route in routes.items()}

"""Ziggy exception hierarchy.

Shared across the snapshot builder, filter engine, binding resolver, and
CLI so every module raises and catches the same types.
"""

from dataclasses import dataclass


class ZiggyError(Exception):
    """Base for all ziggy-specific errors."""


class ConfigurationError(ZiggyError):
    """Raised when a router or ziggy configuration is invalid.

    Typically raised while routes are being registered, or when a
    ``Ziggy`` instance has no way to determine its base URL.
    """


@dataclass(frozen=True, slots=True)
class UnresolvableParameterType(ZiggyError):
    """A handler parameter's bound type could not be determined.

    Raised by ``resolve_parameter_type`` and recovered by the binding
    resolver: the route is still emitted, without a binding for
    ``parameter``.
    """

    parameter: str
    annotation: object
    reason: str = ""
    route: str | None = None

    def __str__(self) -> str:
        where = f" on route {self.route!r}" if self.route else ""
        detail = f": {self.reason}" if self.reason else ""
        return f"Cannot resolve type of parameter {self.parameter!r}{where}{detail}"

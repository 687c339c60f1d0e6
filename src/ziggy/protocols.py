"""Collaborator protocols — what ziggy needs from the host application.

ziggy never reaches for a global app or router: the route source and the
URL resolver are passed in explicitly.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ziggy.routing.route import RawRoute


@runtime_checkable
class RouteSource(Protocol):
    """Anything that can enumerate its registered routes."""

    def list_routes(self) -> Sequence[RawRoute]: ...


@runtime_checkable
class UrlResolver(Protocol):
    """Supplies the canonical base URL.

    Implementations may also define ``default_parameters()`` returning a
    mapping of default URL parameter values; it is looked up with
    ``getattr`` and treated as empty when missing.
    """

    def current_base_url(self) -> str: ...


@dataclass(frozen=True, slots=True)
class StaticUrlResolver:
    """A UrlResolver with a fixed base URL and default parameters."""

    base_url: str
    defaults: Mapping[str, str] = field(default_factory=dict)

    def current_base_url(self) -> str:
        return self.base_url

    def default_parameters(self) -> Mapping[str, str]:
        return dict(self.defaults)

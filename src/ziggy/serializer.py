"""Snapshot assembly and wire encoding.

A ``ZiggySnapshot`` is the complete, immutable result of one export::

    {
        "url": "https://example.com",
        "port": null,
        "defaults": {},
        "routes": {
            "posts.show": {"uri": "posts/{post}", "methods": ["GET"],
                           "bindings": {"post": "slug"}}
        }
    }

``defaults`` is always a JSON object, even when empty; clients destructure
it by key.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit

from ziggy.snapshot import RouteDescriptor


@dataclass(frozen=True, slots=True)
class ZiggySnapshot:
    """The immutable output of one extraction pass."""

    url: str
    port: int | None
    defaults: Mapping[str, Any]
    routes: Mapping[str, RouteDescriptor]


def parse_port(url: str) -> int | None:
    """Return the explicit port in *url*, or None when absent or malformed."""
    try:
        return urlsplit(url).port
    except ValueError:
        return None


def serialize(
    base_url: str,
    defaults: Mapping[str, Any] | None,
    routes: Mapping[str, RouteDescriptor],
) -> ZiggySnapshot:
    """Assemble a snapshot from a base URL, default parameters, and routes."""
    url = base_url.rstrip("/")
    return ZiggySnapshot(
        url=url,
        port=parse_port(url),
        defaults=MappingProxyType(dict(defaults or {})),
        routes=MappingProxyType(dict(routes)),
    )


def route_to_dict(route: RouteDescriptor) -> dict[str, Any]:
    """Return the wire form of a single route."""
    data: dict[str, Any] = {"uri": route.uri, "methods": list(route.methods)}
    if route.domain:
        data["domain"] = route.domain
    if route.bindings:
        data["bindings"] = dict(route.bindings)
    return data


def to_dict(snapshot: ZiggySnapshot) -> dict[str, Any]:
    """Return *snapshot* as plain, JSON-ready data."""
    return {
        "url": snapshot.url,
        "port": snapshot.port,
        "defaults": dict(snapshot.defaults),
        "routes": {name: route_to_dict(route) for name, route in snapshot.routes.items()},
    }


def to_json(snapshot: ZiggySnapshot, **json_kwargs: Any) -> str:
    """Encode *snapshot* as a JSON string.

    Keyword arguments are passed to ``json.dumps`` (e.g. ``indent=2``).
    """
    return json.dumps(to_dict(snapshot), **json_kwargs)


def to_wire(snapshot: ZiggySnapshot) -> bytes:
    """Encode *snapshot* as compact UTF-8 JSON."""
    return to_json(snapshot, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

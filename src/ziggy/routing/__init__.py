"""Routing — an in-process registry of named routes.

Routes are registered during setup and frozen when the router compiles.
The registry is the route source ziggy exports from; it does not match
or dispatch requests.
"""

from ziggy.routing.route import Parameter, PathSegment, RawRoute, Route
from ziggy.routing.router import Router, parse_path, template_uri

__all__ = [
    "Parameter",
    "PathSegment",
    "RawRoute",
    "Route",
    "Router",
    "parse_path",
    "template_uri",
]

"""Route filtering by name pattern.

Patterns are shell-style: ``*`` matches any run of characters (dots
included) and everything else is literal. A name matches a pattern set
when it matches any pattern in it, compared case-sensitively against the
full route name.

Which filter applies is decided by ``apply_filters``, in this order:

1. an explicit group (or list of groups) → keep matching routes
2. both ``except`` and ``only`` configured → no filtering
3. ``except`` → drop matching routes
4. ``only`` → keep matching routes
5. nothing configured → no filtering

Configuration problems never raise; they fall back to the unfiltered
routes and are logged on ``ziggy.filters``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

from ziggy.config import FilterSpec, ZiggyConfig

if TYPE_CHECKING:
    from ziggy.snapshot import RouteDescriptor

logger = logging.getLogger("ziggy.filters")

type Registry = Mapping[str, RouteDescriptor]


def wrap_patterns(patterns: FilterSpec | None) -> tuple[str, ...]:
    """Normalize a single pattern or a collection of patterns to a tuple."""
    if patterns is None:
        return ()
    if isinstance(patterns, str):
        return (patterns,)
    return tuple(patterns)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    """Translate a wildcard pattern into an anchored regex."""
    return re.compile(re.escape(pattern).replace(r"\*", ".*"), re.DOTALL)


def name_matches(name: str, patterns: FilterSpec) -> bool:
    """Return True if *name* matches any of *patterns*."""
    for pattern in wrap_patterns(patterns):
        if pattern == name or _compile(pattern).fullmatch(name):
            return True
    return False


def filter_routes(
    routes: Registry,
    patterns: FilterSpec,
    include: bool = True,
) -> dict[str, RouteDescriptor]:
    """Filter *routes* by name.

    With ``include=True`` only matching routes are kept; with
    ``include=False`` matching routes are dropped. Order is preserved and
    *routes* is left untouched.
    """
    wrapped = wrap_patterns(patterns)
    return {
        name: route
        for name, route in routes.items()
        if name_matches(name, wrapped) is include
    }


@dataclass(frozen=True, slots=True)
class FilterContext:
    """Everything the filter engine needs to choose a policy.

    ``group`` is the group (or groups) requested for this export;
    the remaining fields mirror ``ZiggyConfig``.
    """

    group: str | Sequence[str] | None = None
    except_: FilterSpec | None = None
    only: FilterSpec | None = None
    groups: Mapping[str, FilterSpec] = field(default_factory=dict)

    @classmethod
    def from_config(
        cls,
        config: ZiggyConfig,
        group: str | Sequence[str] | None = None,
    ) -> FilterContext:
        return cls(
            group=group,
            except_=config.except_,
            only=config.only,
            groups=config.groups,
        )


def group_patterns(
    group: str | Sequence[str],
    groups: Mapping[str, FilterSpec],
) -> tuple[str, ...] | None:
    """Resolve a group name (or names) to its configured patterns.

    Returns None when no requested group is configured. Unknown names in
    a list are skipped.
    """
    names = (group,) if isinstance(group, str) else tuple(group)
    patterns: list[str] = []
    found = False
    for name in names:
        if name not in groups:
            logger.warning("Route group %r is not configured", name)
            continue
        found = True
        patterns.extend(wrap_patterns(groups[name]))
    return tuple(patterns) if found else None


def apply_filters(routes: Registry, context: FilterContext) -> dict[str, RouteDescriptor]:
    """Return the routes that should be exposed under *context*."""
    if context.group:
        patterns = group_patterns(context.group, context.groups)
        if patterns is None:
            return dict(routes)
        return filter_routes(routes, patterns, include=True)

    if context.except_ is not None and context.only is not None:
        logger.warning(
            "Both 'except' and 'only' filters are configured; exporting all routes"
        )
        return dict(routes)

    if context.except_ is not None:
        return filter_routes(routes, context.except_, include=False)

    if context.only is not None:
        return filter_routes(routes, context.only, include=True)

    return dict(routes)


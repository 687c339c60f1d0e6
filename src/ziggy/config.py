"""Ziggy configuration.

ZiggyConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups. A filter is "configured" when its field is not None.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

# A single name pattern or a collection of them, e.g. "admin.*" or ("home", "posts.*")
type FilterSpec = str | Sequence[str]


@dataclass(frozen=True, slots=True)
class ZiggyConfig:
    """Route export configuration. Immutable after creation.

    All fields default to "not configured". Override what you need::

        config = ZiggyConfig(
            except_=("debug.*", "horizon.*"),
            groups={"admin": ("admin.*", "users.*")},
        )
    """

    # Filters
    except_: FilterSpec | None = None
    only: FilterSpec | None = None
    groups: Mapping[str, FilterSpec] = field(default_factory=dict)

    # Extra route name prefixes to skip, on top of RESERVED_PREFIXES
    skip_prefixes: tuple[str, ...] = ()

    # Base URL used when no explicit url or resolver is given
    url: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ZiggyConfig:
        """Build a config from a plain mapping (e.g. a parsed settings file).

        Accepts the conventional ``except`` key as well as ``except_``::

            ZiggyConfig.from_mapping({"except": ["_debug.*"], "groups": {...}})
        """
        except_ = data.get("except", data.get("except_"))
        return cls(
            except_=except_,
            only=data.get("only"),
            groups=dict(data.get("groups") or {}),
            skip_prefixes=tuple(data.get("skip_prefixes") or ()),
            url=data.get("url"),
        )

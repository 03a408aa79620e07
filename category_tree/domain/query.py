"""Query primitives passed to category stores."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Order:
    """Sort directions accepted in an ordering mapping."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"


class OverlayMode(str, Enum):
    """Which occurrences of an id a locale variant replaces."""

    FIRST = "first"
    ALL = "all"


@dataclass(frozen=True)
class Equals:
    """field == value"""

    field: str
    value: Any


@dataclass(frozen=True)
class In:
    """field IN values"""

    field: str
    values: tuple

    def __init__(self, field: str, values):
        object.__setattr__(self, "field", field)
        object.__setattr__(self, "values", tuple(values))


@dataclass(frozen=True)
class And:
    """Conjunction of conditions."""

    conditions: tuple

    def __init__(self, *conditions: "Condition"):
        object.__setattr__(self, "conditions", tuple(conditions))


Condition = Union[Equals, In, And]
Ordering = dict[str, str]

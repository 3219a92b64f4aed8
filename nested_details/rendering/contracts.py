"""Collaborator contracts for the renderer.

The grouping service and the row renderer live outside this package.
LegacyGroupingAdapter lets a partitioner that still returns untagged
dict sets plug in: each raw set is classified once, here, so the
renderer only ever sees tagged GroupSets.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Protocol

from nested_details.options.schemas import GroupingLevel

from .schemas import GroupSet, LeafGroupSet, NestedGroupSet, RenderedRow, ResultRow

logger = logging.getLogger(__name__)


class GroupingService(Protocol):
    """Partitions result rows into nested grouping sets."""

    def partition(
        self,
        rows: Sequence[ResultRow],
        grouping: Sequence[GroupingLevel],
        use_grouping_title: bool,
    ) -> list[GroupSet]:
        """Always returns at least one top-level set."""
        ...


class RowRenderer(Protocol):
    """Turns one result row into a display fragment."""

    def render_row(self, row: ResultRow, index: int) -> RenderedRow:
        ...


def is_group_marker(item: Any) -> bool:
    """Check whether an element of a raw set's rows is itself a group."""
    return isinstance(item, Mapping) and "group" in item


def classify_set(raw: Mapping[str, Any]) -> GroupSet:
    """Turn a raw ``{"group", "level", "rows"}`` set into a tagged GroupSet.

    A set is nested iff the first element of its rows carries a ``group``
    key. Nested children are classified recursively.
    """
    rows = list(raw.get("rows") or [])
    level = raw.get("level") or 0
    group = raw.get("group")
    group = "" if group is None else str(group)

    if rows and is_group_marker(rows[0]):
        return NestedGroupSet(
            level=level,
            group=group,
            children=[classify_set(child) for child in rows],
        )
    return LeafGroupSet(level=level, group=group, rows=rows)


class LegacyGroupingAdapter:
    """GroupingService backed by a partitioner returning raw dict sets."""

    def __init__(
        self,
        partition_fn: Callable[
            [Sequence[ResultRow], Sequence[GroupingLevel], bool],
            Sequence[Mapping[str, Any]],
        ],
    ):
        self._partition_fn = partition_fn

    def partition(
        self,
        rows: Sequence[ResultRow],
        grouping: Sequence[GroupingLevel],
        use_grouping_title: bool,
    ) -> list[GroupSet]:
        raw_sets = self._partition_fn(rows, grouping, use_grouping_title)
        sets = [classify_set(raw) for raw in raw_sets]
        logger.debug(f"Classified {len(sets)} grouping sets")
        return sets

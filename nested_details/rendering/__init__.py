"""Rendering of grouping sets into nested details display nodes."""

from .contracts import GroupingService, LegacyGroupingAdapter, RowRenderer, classify_set
from .renderer import GroupedDetailsRenderer
from .schemas import (
    DisplayNode,
    GroupSet,
    LeafGroupSet,
    NestedGroupBody,
    NestedGroupSet,
    RawGroupSet,
    RenderedRow,
    RenderOutcome,
    RenderStatus,
    RowGroupBody,
    ViewContext,
)
from .themes import build_theme_suggestions

__all__ = [
    "DisplayNode",
    "GroupSet",
    "GroupedDetailsRenderer",
    "GroupingService",
    "LeafGroupSet",
    "LegacyGroupingAdapter",
    "NestedGroupBody",
    "NestedGroupSet",
    "RenderOutcome",
    "RenderStatus",
    "RawGroupSet",
    "RenderedRow",
    "RowGroupBody",
    "RowRenderer",
    "ViewContext",
    "build_theme_suggestions",
    "classify_set",
]

"""Grouped details renderer.

Turns the grouping sets produced by the grouping service into display
nodes, one details element per set:

- nested sets become template context for the grouping theme, which the
  template layer expands level by level
- leaf sets have each row rendered through the row renderer, with the
  row's position inside its group passed along
"""

import logging
from collections.abc import Sequence
from typing import Optional

from nested_details.options.schemas import NestedDetailsOptions

from .contracts import GroupingService, RowRenderer
from .schemas import (
    DisplayNode,
    GroupSet,
    LeafGroupSet,
    NestedGroupBody,
    NestedGroupSet,
    RenderedRow,
    RenderOutcome,
    RenderStatus,
    ResultRow,
    RowGroupBody,
    ViewContext,
)
from .themes import build_theme_suggestions

logger = logging.getLogger(__name__)

STYLE_THEME = "views_view_nested_details"
GROUPING_THEME = "views_view_nested_details_section_grouping"


class GroupedDetailsRenderer:
    """Renders result rows as nested details elements."""

    uses_row_plugin = True

    def __init__(
        self,
        view: ViewContext,
        options: NestedDetailsOptions,
        grouping_service: GroupingService,
        row_renderer: Optional[RowRenderer] = None,
        style_theme: str = STYLE_THEME,
        grouping_theme: str = GROUPING_THEME,
    ):
        self.view = view
        self.options = options
        self.grouping_service = grouping_service
        self.row_renderer = row_renderer
        self.style_theme = style_theme
        self.grouping_theme = grouping_theme

    def render(self, rows: Sequence[ResultRow]) -> RenderOutcome:
        """Group the rows and render every grouping set.

        Returns a NO_ROW_RENDERER outcome with no nodes when the style
        needs a row renderer and none is configured.
        """
        if self.uses_row_plugin and self.row_renderer is None:
            logger.warning(
                f"Missing row renderer for view '{self.view.view_id}' "
                f"display '{self.view.display_id}'"
            )
            return RenderOutcome(status=RenderStatus.NO_ROW_RENDERER)

        sets = self.grouping_service.partition(
            rows, self.options.grouping, use_grouping_title=True
        )
        nodes = self.render_grouping_sets(sets)
        logger.debug(
            f"Rendered {len(sets)} grouping sets into {len(nodes)} details "
            f"for view '{self.view.view_id}'"
        )
        return RenderOutcome(status=RenderStatus.RENDERED, nodes=nodes)

    def render_grouping_sets(self, sets: Sequence[GroupSet]) -> list[DisplayNode]:
        """Render grouping sets into display nodes, preserving their order."""
        output = []
        grouping_themes = build_theme_suggestions(self.grouping_theme, self.view)

        for group_set in sets:
            if isinstance(group_set, NestedGroupSet):
                body = NestedGroupBody(
                    theme=grouping_themes,
                    view=self.view,
                    grouping=self.options.grouping_level(group_set.level),
                    rows=group_set.children,
                )
            else:
                body = self.render_row_group(self._render_rows(group_set))

            output.append(
                DisplayNode(level=group_set.level, title=group_set.group, body=body)
            )

        return output

    def render_row_group(self, rows: Sequence[RenderedRow]) -> RowGroupBody:
        """Wrap rendered rows in the style theme context."""
        return RowGroupBody(
            theme=build_theme_suggestions(self.style_theme, self.view),
            view=self.view,
            options=self.options,
            rows=list(rows),
        )

    def _render_rows(self, group_set: LeafGroupSet) -> list[RenderedRow]:
        if not self.uses_row_plugin or self.row_renderer is None:
            return [
                RenderedRow(index=index, content=row)
                for index, row in enumerate(group_set.rows)
            ]
        return [
            self.row_renderer.render_row(row, index)
            for index, row in enumerate(group_set.rows)
        ]

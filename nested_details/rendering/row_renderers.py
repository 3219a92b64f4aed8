"""Row renderers available to the HTTP service.

Real deployments plug in the host's row plugins. The service only knows
the fields renderer, which passes each row's fields through untouched.
"""

from typing import Optional

from nested_details.options.schemas import NestedDetailsOptions

from .contracts import RowRenderer
from .schemas import RenderedRow, ResultRow


class FieldsRowRenderer:
    """Renders a row as its field values with the configured row class."""

    def __init__(self, options: NestedDetailsOptions):
        self.options = options

    def render_row(self, row: ResultRow, index: int) -> RenderedRow:
        return RenderedRow(
            index=index,
            content=dict(row),
            css_class=self.options.row_class,
        )


ROW_RENDERERS = {
    "fields": FieldsRowRenderer,
}


def get_row_renderer(
    name: Optional[str], options: NestedDetailsOptions
) -> Optional[RowRenderer]:
    """Get a row renderer by name, None when no name is given.

    Raises:
        KeyError: If the name is not a known row renderer.
    """
    if name is None:
        return None
    return ROW_RENDERERS[name](options)

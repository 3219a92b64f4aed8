"""Rendering schemas — grouping sets in, display nodes out.

GroupSets arrive from the grouping service already tagged as either a
nested group (children are further GroupSets) or a leaf (plain result
rows). DisplayNodes carry the context the template layer needs to emit
one details element per set.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag, model_validator

from nested_details.options.schemas import GroupingLevel, NestedDetailsOptions

# One result row. Its fields only matter to the row renderer.
ResultRow = dict[str, Any]


class NestedGroupSet(BaseModel):
    """A grouping set whose children are themselves grouping sets."""

    kind: Literal["nested"] = "nested"
    level: int = Field(default=0, ge=0, description="Nesting depth, 0 is outermost")
    group: str = Field(default="", description="Group label, empty when ungrouped")
    children: list["GroupSet"] = Field(default_factory=list)


class LeafGroupSet(BaseModel):
    """A grouping set holding plain result rows."""

    kind: Literal["leaf"] = "leaf"
    level: int = Field(default=0, ge=0, description="Nesting depth, 0 is outermost")
    group: str = Field(default="", description="Group label, empty when ungrouped")
    rows: list[ResultRow] = Field(default_factory=list)


GroupSet = Annotated[Union[NestedGroupSet, LeafGroupSet], Field(discriminator="kind")]

NestedGroupSet.model_rebuild()


def _raw_item_kind(item: Any) -> str:
    if isinstance(item, RawGroupSet) or (isinstance(item, Mapping) and "group" in item):
        return "set"
    return "row"


# An element of a raw set's rows: a nested raw set or a plain result row
RawSetItem = Annotated[
    Union[
        Annotated["RawGroupSet", Tag("set")],
        Annotated[ResultRow, Tag("row")],
    ],
    Discriminator(_raw_item_kind),
]


class RawGroupSet(BaseModel):
    """Untagged grouping set as produced by a legacy partitioner.

    Whether the set is nested is decided later by classify_set, from the
    first element of rows.
    """

    group: str = Field(default="", description="Group label, empty when ungrouped")
    level: int = Field(default=0, ge=0)
    rows: list[RawSetItem] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _stringify_group(cls, data: Any) -> Any:
        """Group labels taken from numeric fields (years, ids) become strings."""
        if isinstance(data, dict):
            group = data.get("group")
            if group is None:
                data = {**data, "group": ""}
            elif isinstance(group, (int, float)) and not isinstance(group, bool):
                data = {**data, "group": str(group)}
        return data

    @model_validator(mode="after")
    def validate_uniform_rows(self) -> "RawGroupSet":
        """Ensure rows are either all nested sets or all plain rows."""
        nested = [isinstance(item, RawGroupSet) for item in self.rows]
        if any(nested) and not all(nested):
            raise ValueError(
                f"Set '{self.group}' mixes nested grouping sets and plain rows"
            )
        return self


RawGroupSet.model_rebuild()


class ViewContext(BaseModel):
    """The view and display being rendered."""

    view_id: str = Field(..., description="Machine name of the view")
    display_id: str = Field(default="default", description="Display machine name")
    display_plugin: str = Field(
        default="default",
        description="Display plugin id (e.g. 'page', 'block', 'default')",
    )
    tag: str = Field(default="", description="Optional view tag")


class RenderedRow(BaseModel):
    """Display fragment produced by a row renderer for one row."""

    index: int = Field(..., ge=0, description="Position of the row within its group")
    content: dict[str, Any] = Field(default_factory=dict)
    css_class: str = ""


class NestedGroupBody(BaseModel):
    """Template context for a nested group, expanded by the template layer."""

    kind: Literal["nested"] = "nested"
    theme: list[str] = Field(
        default_factory=list,
        description="Theme suggestions, most specific first",
    )
    view: ViewContext
    grouping: Optional[GroupingLevel] = None
    rows: list[GroupSet] = Field(default_factory=list)


class RowGroupBody(BaseModel):
    """Template context for a group of rendered rows."""

    kind: Literal["rows"] = "rows"
    theme: list[str] = Field(default_factory=list)
    view: ViewContext
    options: NestedDetailsOptions
    rows: list[RenderedRow] = Field(default_factory=list)


class DisplayNode(BaseModel):
    """One renderable details element."""

    level: int = 0
    title: str = ""
    body: Union[NestedGroupBody, RowGroupBody] = Field(discriminator="kind")


class RenderStatus(str, Enum):
    """Outcome of a render pass."""
    RENDERED = "rendered"
    NO_ROW_RENDERER = "no_row_renderer"


class RenderOutcome(BaseModel):
    """Result of rendering a view with the nested details style."""

    status: RenderStatus = RenderStatus.RENDERED
    nodes: list[DisplayNode] = Field(default_factory=list)

    @property
    def is_ok(self) -> bool:
        return self.status == RenderStatus.RENDERED

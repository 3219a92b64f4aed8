"""Option schemas for the nested details style.

NestedDetailsOptions holds everything a site builder configures for the
style: grouping levels, row classes and the details behavior. FormElement
describes one widget of the options form handed to a configuration UI.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class GroupingLevel(BaseModel):
    """One configured grouping level."""

    field: str = Field(
        ...,
        description="Field whose value partitions the rows at this level",
    )
    rendered: bool = Field(
        default=True,
        description="Group by the rendered field output instead of the raw value",
    )
    rendered_strip: bool = Field(
        default=False,
        description="Strip markup from the rendered output before grouping",
    )


class NestedDetailsOptions(BaseModel):
    """Style options with their defaults."""

    grouping: list[GroupingLevel] = Field(
        default_factory=list,
        description="Grouping levels, outermost first",
    )
    row_class: str = Field(
        default="",
        description="CSS class applied to each rendered row",
    )
    default_row_class: bool = Field(
        default=True,
        description="Add the default row classes",
    )

    # Details behavior
    collapsed: bool = Field(
        default=False,
        description="Show details collapsed",
    )
    open_first: bool = Field(
        default=True,
        description="Leave the first details element open when collapsed",
    )
    title: str = Field(
        default="",
        description="Field used as the details title ('' for none)",
    )
    description: str = Field(
        default="",
        description="Field used as the details description ('' for none)",
    )
    override: bool = Field(default=True)

    def grouping_level(self, level: int) -> Optional[GroupingLevel]:
        """Get the grouping configuration for a nesting level, if any."""
        if 0 <= level < len(self.grouping):
            return self.grouping[level]
        return None


class FormElement(BaseModel):
    """A single options form widget."""

    name: str
    type: str = Field(
        ...,
        description="Widget type: 'checkbox' or 'select'",
    )
    title: str
    description: str = ""
    default_value: Any = None
    weight: int = 0
    options: Optional[dict[str, str]] = Field(
        default=None,
        description="Choices for select widgets, value -> label",
    )
    states: dict[str, dict[str, dict[str, Any]]] = Field(
        default_factory=dict,
        description="Client-side visibility states keyed by state name",
    )

"""Style plugin definition schemas — data models for the style catalog.

A StylePluginDefinition declares what the host display system needs to
know before it instantiates a style: its id, label, theme hooks and
which displays and features it supports.
"""

from pydantic import BaseModel, Field


class StylePluginDefinition(BaseModel):
    """Declaration of a display style plugin."""

    # Identity
    plugin_id: str = Field(
        ...,
        description="Unique identifier (snake_case, e.g. 'nested_details')",
    )
    title: str = Field(
        ...,
        description="Human-readable name shown in the style picker",
    )
    help: str = Field(
        default="",
        description="Short help text shown next to the style",
    )

    # Theming
    theme: str = Field(
        ...,
        description="Theme hook for a group of rendered rows",
    )
    grouping_theme: str = Field(
        default="",
        description="Theme hook for nested grouping sets",
    )

    display_types: list[str] = Field(
        default_factory=lambda: ["normal"],
        description="Display types this style can be used on",
    )

    # Capabilities
    uses_fields: bool = True
    uses_row_plugin: bool = True
    uses_row_class: bool = True
    default_field_labels: bool = True


class StylePluginSummary(BaseModel):
    """Lightweight summary for listing endpoints."""

    plugin_id: str
    title: str
    help: str = ""
    display_types: list[str] = Field(default_factory=list)

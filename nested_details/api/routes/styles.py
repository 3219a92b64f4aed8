"""API routes for style plugin definitions, options and rendering.

Consumers fetch the style catalog, the default options and the options
form, and can render pre-grouped result sets into display nodes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from nested_details.options import (
    FormElement,
    NestedDetailsOptions,
    build_options_form,
    define_options,
)
from nested_details.rendering import (
    GroupedDetailsRenderer,
    LegacyGroupingAdapter,
    RawGroupSet,
    RenderOutcome,
    ViewContext,
)
from nested_details.rendering.row_renderers import ROW_RENDERERS, get_row_renderer
from nested_details.styles.registry import get_style_registry
from nested_details.styles.schemas import StylePluginDefinition, StylePluginSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/styles", tags=["styles"])


class OptionsFormRequest(BaseModel):
    """Current options plus the fields available on the display."""

    options: NestedDetailsOptions = Field(default_factory=NestedDetailsOptions)
    field_labels: dict[str, str] = Field(
        default_factory=dict,
        description="Field id -> label",
    )


class RenderRequest(BaseModel):
    """Grouping sets to render with a style."""

    view: ViewContext
    options: NestedDetailsOptions = Field(default_factory=NestedDetailsOptions)
    sets: list[RawGroupSet] = Field(
        default_factory=list,
        description="Grouping sets as produced by the grouping service: "
        "{'group': str, 'level': int, 'rows': [...]}",
    )
    row_plugin: Optional[str] = Field(
        default="fields",
        description="Row renderer to use, null for none",
    )


def _get_or_404(plugin_id: str) -> StylePluginDefinition:
    """Get a style by plugin id or raise 404."""
    registry = get_style_registry()
    style = registry.get(plugin_id)
    if style is None:
        available = registry.list_keys()
        raise HTTPException(
            status_code=404,
            detail=f"Style '{plugin_id}' not found. Available: {available}",
        )
    return style


@router.get("", response_model=list[StylePluginSummary])
async def list_styles():
    """List all style definitions (summaries)."""
    registry = get_style_registry()
    return registry.list_summaries()


@router.post("/reload")
async def reload_styles():
    """Force reload style definitions from disk."""
    registry = get_style_registry()
    registry.reload()
    return {"reloaded": True, "count": registry.count()}


@router.get("/{plugin_id}", response_model=StylePluginDefinition)
async def get_style(plugin_id: str):
    """Get a single style definition by plugin id."""
    return _get_or_404(plugin_id)


@router.get("/{plugin_id}/options", response_model=NestedDetailsOptions)
async def get_default_options(plugin_id: str):
    """Get the default options for a style."""
    _get_or_404(plugin_id)
    return define_options()


@router.post("/{plugin_id}/options-form", response_model=list[FormElement])
async def get_options_form(plugin_id: str, request: OptionsFormRequest):
    """Build the options form for a style, ordered by weight."""
    _get_or_404(plugin_id)
    return build_options_form(request.options, request.field_labels)


@router.post("/{plugin_id}/render", response_model=RenderOutcome)
async def render_sets(plugin_id: str, request: RenderRequest):
    """
    Render grouping sets into display nodes.

    A missing row renderer is reported in the outcome status, not as an
    HTTP error.
    """
    style = _get_or_404(plugin_id)

    try:
        row_renderer = get_row_renderer(request.row_plugin, request.options)
    except KeyError:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown row plugin '{request.row_plugin}'. "
            f"Available: {sorted(ROW_RENDERERS)}",
        )

    # Sets arrive already partitioned by the caller's grouping service
    grouping_service = LegacyGroupingAdapter(
        lambda rows, grouping, use_title: [s.model_dump() for s in request.sets]
    )
    renderer = GroupedDetailsRenderer(
        view=request.view,
        options=request.options,
        grouping_service=grouping_service,
        row_renderer=row_renderer,
        style_theme=style.theme,
        grouping_theme=style.grouping_theme or style.theme,
    )
    outcome = renderer.render([])
    logger.info(
        f"Rendered {len(request.sets)} sets for view '{request.view.view_id}' "
        f"with style '{plugin_id}': {outcome.status.value}"
    )
    return outcome

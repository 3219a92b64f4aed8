"""Options defaults and the options form for the nested details style."""

import logging
from typing import Optional

from .schemas import FormElement, NestedDetailsOptions

logger = logging.getLogger(__name__)

NONE_CHOICE = {"": "- None -"}


def define_options() -> NestedDetailsOptions:
    """Return the default style options."""
    return NestedDetailsOptions()


def build_options_form(
    options: Optional[NestedDetailsOptions] = None,
    field_labels: Optional[dict[str, str]] = None,
) -> list[FormElement]:
    """Build the options form elements, ordered by weight.

    Args:
        options: Current option values used as defaults. Falls back to
            define_options() when omitted.
        field_labels: Field id -> label for the fields available on the
            display. Offered as choices for the title and description.
    """
    options = options or define_options()
    field_choices = dict(NONE_CHOICE)
    for field_id, label in (field_labels or {}).items():
        field_choices.setdefault(field_id, label)

    elements = [
        FormElement(
            name="collapsed",
            type="checkbox",
            title="Collapsed by default",
            description="Check to show details collapsed.",
            default_value=options.collapsed,
            weight=-49,
        ),
        FormElement(
            name="open_first",
            type="checkbox",
            title="Leave first fieldset open",
            description="Check to leave first fieldset open.",
            default_value=options.open_first,
            weight=-48,
            states={
                "invisible": {
                    ':input[name="style_options[collapsed]"]': {"checked": False},
                },
            },
        ),
        FormElement(
            name="title",
            type="select",
            title="Details Title",
            description="Choose the title of details.",
            default_value=options.title,
            weight=-47,
            options=field_choices,
        ),
        FormElement(
            name="description",
            type="select",
            title="Details Description",
            description="Optional details description.",
            default_value=options.description,
            weight=-46,
            options=field_choices,
        ),
    ]

    for element in elements:
        if element.type == "select" and element.default_value not in field_choices:
            logger.warning(
                f"Option '{element.name}' references unknown field "
                f"'{element.default_value}'"
            )

    return sorted(elements, key=lambda e: e.weight)

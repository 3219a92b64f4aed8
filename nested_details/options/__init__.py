"""Options for the nested details style: defaults and the form description."""

from .form import build_options_form, define_options
from .schemas import FormElement, GroupingLevel, NestedDetailsOptions

__all__ = [
    "FormElement",
    "GroupingLevel",
    "NestedDetailsOptions",
    "build_options_form",
    "define_options",
]

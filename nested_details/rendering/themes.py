"""Theme suggestion building."""

import re

from .schemas import ViewContext


def build_theme_suggestions(hook: str, view: ViewContext) -> list[str]:
    """Build theme suggestions for a hook, most specific first.

    The template layer picks the first suggestion it has a template for,
    so site themes can override output per view, per display or per tag.
    """
    themes = [
        f"{hook}__{view.view_id}__{view.display_id}",
        f"{hook}__{view.display_id}",
    ]

    if view.tag:
        themes.append(f"{hook}__{re.sub(r'[^a-z0-9]', '_', view.tag.lower())}")

    if view.display_id != view.display_plugin:
        themes.append(f"{hook}__{view.view_id}__{view.display_plugin}")
        themes.append(f"{hook}__{view.display_plugin}")

    themes.append(f"{hook}__{view.view_id}")
    themes.append(hook)
    return themes

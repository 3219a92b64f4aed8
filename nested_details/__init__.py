"""Views Nested Details - grouped result display as nested details elements.

This package provides a style plugin for a query-result display system:
- Plugin definitions (id, theme, supported display types)
- Options and the options form description for configuration UIs
- Rendering of grouping sets into display nodes for the template layer
"""

__version__ = "0.1.0"

"""Style registry — the catalog of display styles offered to site builders.

Each style is one YAML file under definitions/ (or the directory named by
NESTED_DETAILS_DEFINITIONS_DIR). A file that fails validation is logged
and skipped.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from .schemas import StylePluginDefinition, StylePluginSummary

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path(
    os.environ.get(
        "NESTED_DETAILS_DEFINITIONS_DIR",
        str(Path(__file__).parent / "definitions"),
    )
)


class StyleRegistry:
    """Registry of style plugin definitions loaded from YAML files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        self.definitions_dir = definitions_dir or DEFINITIONS_DIR
        self._styles: dict[str, StylePluginDefinition] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all style definitions from YAML files."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(
                f"Style definitions directory not found: {self.definitions_dir}"
            )
            self._loaded = True
            return

        for yaml_file in sorted(self.definitions_dir.glob("*.yaml")):
            try:
                with open(yaml_file) as f:
                    data = yaml.safe_load(f)
                style = StylePluginDefinition.model_validate(data)
                self._styles[style.plugin_id] = style
                logger.debug(f"Loaded style: {style.plugin_id}")
            except Exception as e:
                logger.error(f"Failed to load style from {yaml_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._styles)} style definitions")

    def get(self, plugin_id: str) -> Optional[StylePluginDefinition]:
        """Get a style definition by plugin id."""
        self.load()
        return self._styles.get(plugin_id)

    def list_all(self) -> list[StylePluginDefinition]:
        """List all style definitions."""
        self.load()
        return list(self._styles.values())

    def list_summaries(self) -> list[StylePluginSummary]:
        """List style summaries sorted by plugin id."""
        self.load()
        return [
            StylePluginSummary(
                plugin_id=s.plugin_id,
                title=s.title,
                help=s.help,
                display_types=s.display_types,
            )
            for s in sorted(self._styles.values(), key=lambda s: s.plugin_id)
        ]

    def list_keys(self) -> list[str]:
        """List all plugin ids."""
        self.load()
        return list(self._styles.keys())

    def count(self) -> int:
        """Get total number of styles."""
        self.load()
        return len(self._styles)

    def for_display_type(self, display_type: str) -> list[StylePluginDefinition]:
        """Get styles usable on a display type."""
        self.load()
        return [s for s in self._styles.values() if display_type in s.display_types]

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._styles.clear()
        self.load()


# Global registry instance
_registry: Optional[StyleRegistry] = None


def get_style_registry() -> StyleRegistry:
    """Get the global style registry instance."""
    global _registry
    if _registry is None:
        _registry = StyleRegistry()
        _registry.load()
    return _registry

"""Design tokens and Tailwind configuration."""

from alramy.design.tailwind import WEBAPP_CONTENT, app_config, base_config, render_config
from alramy.design.tokens import COLORS, SPACING, TYPOGRAPHY

__all__ = [
    "COLORS",
    "SPACING",
    "TYPOGRAPHY",
    "WEBAPP_CONTENT",
    "app_config",
    "base_config",
    "render_config",
]

"""Tailwind configuration composition.

The base config carries the shared tokens; each app adds its content globs and
optional theme extensions on top. render_config() writes the result as the ES
module the JavaScript build imports.
"""

import copy
import json
from typing import Any

from alramy.design.tokens import COLORS, SPACING, TYPOGRAPHY

WEBAPP_CONTENT = [
    "./app/**/*.{js,ts,jsx,tsx,mdx}",
    "./components/**/*.{js,ts,jsx,tsx,mdx}",
    "../../packages/ui/src/**/*.{js,ts,jsx,tsx}",
    "../../packages/shadcn/src/**/*.{js,ts,jsx,tsx}",
]


def base_config() -> dict[str, Any]:
    """Shared Tailwind config. Returns a fresh copy on every call."""
    return copy.deepcopy(
        {
            "darkMode": ["class", '[data-theme="dark"]'],
            "theme": {
                "extend": {
                    "colors": COLORS,
                    "fontFamily": TYPOGRAPHY["fontFamily"],
                    "fontSize": TYPOGRAPHY["fontSize"],
                    "spacing": SPACING,
                    "borderRadius": {
                        "lg": "var(--radius)",
                        "md": "calc(var(--radius) - 2px)",
                        "sm": "calc(var(--radius) - 4px)",
                    },
                },
            },
            "plugins": [],
        }
    )


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def app_config(
    content: list[str], extend: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Compose an app's Tailwind config from the base config.

    Args:
        content: Source globs Tailwind scans for class names
        extend: App-specific theme extensions (win over base values)
    """
    config = base_config()
    config["content"] = list(content)
    if extend:
        config["theme"]["extend"] = _deep_merge(config["theme"]["extend"], extend)
    return config


def render_config(config: dict[str, Any]) -> str:
    """Render a config as an ES module."""
    return (
        "/** @type {import('tailwindcss').Config} */\n"
        f"export default {json.dumps(config, indent=2)};\n"
    )

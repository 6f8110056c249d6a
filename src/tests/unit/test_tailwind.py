"""Tests for design tokens and Tailwind config composition."""

import json

from alramy.cli.tailwind import main
from alramy.design import (
    COLORS,
    SPACING,
    TYPOGRAPHY,
    WEBAPP_CONTENT,
    app_config,
    base_config,
    render_config,
)


def _parse_module(rendered: str) -> dict:
    body = rendered.split("export default ", 1)[1].rstrip().rstrip(";")
    return json.loads(body)


class TestBaseConfig:
    """base_config() tests."""

    def test_shape(self) -> None:
        """The base config carries the shared tokens."""
        config = base_config()
        assert config["darkMode"] == ["class", '[data-theme="dark"]']
        assert config["plugins"] == []
        extend = config["theme"]["extend"]
        assert extend["colors"] == COLORS
        assert extend["spacing"] == SPACING
        assert extend["fontFamily"] == TYPOGRAPHY["fontFamily"]
        assert extend["fontSize"] == TYPOGRAPHY["fontSize"]
        assert extend["borderRadius"] == {
            "lg": "var(--radius)",
            "md": "calc(var(--radius) - 2px)",
            "sm": "calc(var(--radius) - 4px)",
        }

    def test_fresh_copy(self) -> None:
        """Mutating a returned config never leaks into the tokens."""
        config = base_config()
        config["theme"]["extend"]["colors"]["primary"]["DEFAULT"] = "red"
        assert COLORS["primary"]["DEFAULT"] == "hsl(var(--primary))"
        assert base_config()["theme"]["extend"]["colors"]["primary"]["DEFAULT"] != "red"


class TestAppConfig:
    """app_config() tests."""

    def test_content_added(self) -> None:
        """App content globs are set on top of the base."""
        config = app_config(WEBAPP_CONTENT)
        assert config["content"] == WEBAPP_CONTENT
        assert config["theme"] == base_config()["theme"]

    def test_extend_merges(self) -> None:
        """App extensions deep-merge into theme.extend and win on conflict."""
        config = app_config(
            ["./app/**/*.tsx"],
            extend={"colors": {"brand": "#0f766e", "border": "#e5e7eb"}},
        )
        colors = config["theme"]["extend"]["colors"]
        assert colors["brand"] == "#0f766e"
        assert colors["border"] == "#e5e7eb"
        assert colors["primary"] == COLORS["primary"]
        assert "brand" not in base_config()["theme"]["extend"]["colors"]


class TestRenderConfig:
    """render_config() and CLI tests."""

    def test_es_module(self) -> None:
        """Rendered config is an ES module exporting the config."""
        config = app_config(WEBAPP_CONTENT)
        rendered = render_config(config)
        assert rendered.startswith("/** @type {import('tailwindcss').Config} */\n")
        assert _parse_module(rendered) == config

    def test_cli_writes_file(self, tmp_path) -> None:
        """The CLI writes the webapp config to a file."""
        output = tmp_path / "tailwind.config.js"
        assert main(["webapp", "-o", str(output)]) == 0
        assert _parse_module(output.read_text())["content"] == WEBAPP_CONTENT

    def test_cli_stdout(self, capsys) -> None:
        """Without -o the config goes to stdout."""
        assert main(["admin"]) == 0
        config = _parse_module(capsys.readouterr().out)
        assert "./app/**/*.{js,ts,jsx,tsx,mdx}" in config["content"]

"""Tailwind config CLI.

Usage:
    alramy-tailwind webapp -o apps/webapp/tailwind.config.js
    alramy-tailwind admin
"""

import argparse
import sys
from pathlib import Path

from alramy.design import WEBAPP_CONTENT, app_config, render_config

ADMIN_CONTENT = [
    "./app/**/*.{js,ts,jsx,tsx,mdx}",
    "../../packages/ui/src/**/*.{js,ts,jsx,tsx}",
]

_SITE_CONTENT = {
    "webapp": WEBAPP_CONTENT,
    "admin": ADMIN_CONTENT,
}


def build(site: str) -> str:
    """Render the Tailwind config module for a site."""
    return render_config(app_config(_SITE_CONTENT[site]))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate Tailwind config")
    parser.add_argument("site", choices=sorted(_SITE_CONTENT))
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    args = parser.parse_args(argv)

    rendered = build(args.site)
    if args.output:
        Path(args.output).write_text(rendered, encoding="utf-8")
        print(f"Tailwind config written to {args.output}")
    else:
        sys.stdout.write(rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())

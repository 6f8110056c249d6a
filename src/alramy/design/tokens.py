"""Design tokens shared by the webapp and the admin dashboard.

Colors resolve to CSS custom properties defined in each app's global
stylesheet, so light and dark themes only swap variable values.
"""

COLORS: dict[str, str | dict[str, str]] = {
    "border": "hsl(var(--border))",
    "input": "hsl(var(--input))",
    "ring": "hsl(var(--ring))",
    "background": "hsl(var(--background))",
    "foreground": "hsl(var(--foreground))",
    "primary": {
        "DEFAULT": "hsl(var(--primary))",
        "foreground": "hsl(var(--primary-foreground))",
    },
    "secondary": {
        "DEFAULT": "hsl(var(--secondary))",
        "foreground": "hsl(var(--secondary-foreground))",
    },
    "destructive": {
        "DEFAULT": "hsl(var(--destructive))",
        "foreground": "hsl(var(--destructive-foreground))",
    },
    "muted": {
        "DEFAULT": "hsl(var(--muted))",
        "foreground": "hsl(var(--muted-foreground))",
    },
    "accent": {
        "DEFAULT": "hsl(var(--accent))",
        "foreground": "hsl(var(--accent-foreground))",
    },
    "card": {
        "DEFAULT": "hsl(var(--card))",
        "foreground": "hsl(var(--card-foreground))",
    },
}

SPACING: dict[str, str] = {
    "18": "4.5rem",
    "88": "22rem",
    "128": "32rem",
}

TYPOGRAPHY: dict[str, dict] = {
    "fontFamily": {
        "sans": ["var(--font-sans)", "system-ui", "sans-serif"],
        "serif": ["var(--font-serif)", "Georgia", "serif"],
        "mono": ["var(--font-mono)", "ui-monospace", "monospace"],
    },
    # [size, line-height]
    "fontSize": {
        "xs": ["0.75rem", "1rem"],
        "sm": ["0.875rem", "1.25rem"],
        "base": ["1rem", "1.5rem"],
        "lg": ["1.125rem", "1.75rem"],
        "xl": ["1.25rem", "1.75rem"],
        "2xl": ["1.5rem", "2rem"],
        "3xl": ["1.875rem", "2.25rem"],
        "4xl": ["2.25rem", "2.5rem"],
    },
}

"""HTML pages rendered by the router."""

from html import escape


def not_found_page(
    title: str = "Error 404",
    message: str = "Page not found",
    lang: str = "en",
    direction: str = "ltr",
) -> str:
    """Return the default 404 page."""
    title = escape(title)
    return f"""<!doctype html>
<html lang="{escape(lang)}" dir="{escape(direction)}">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{title}</title>
    <style>
        body {{
            background: #fff;
            color: #000;
            font-family: Arial, Helvetica, sans-serif;
            font-size: 1.2rem;
            line-height: 1.5rem;
            margin: 1rem;
        }}
    </style>
</head>
<body>
<h1>{title}</h1>
<p>{escape(message)}</p>
</body>
</html>
"""

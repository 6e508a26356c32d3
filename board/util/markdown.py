"""Markdown rendering for user-authored text."""

from markdown_it import MarkdownIt

# Raw HTML in user input is escaped rather than passed through
_renderer = MarkdownIt("commonmark", {"html": False, "linkify": False})


def render_markdown(text: str) -> str:
    """Render markdown source to HTML.

    Args:
        text: Markdown source

    Returns:
        Rendered HTML
    """
    return _renderer.render(text)

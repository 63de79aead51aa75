"""
Text Helpers For Telegram HTML And MarkdownV2 Messages.
"""

import html
from typing import Optional

from telegram.helpers import escape_markdown as telegram_escape_markdown


def escape_html(text: Optional[str]) -> str:
    """Escape Text For parse_mode=HTML. None Becomes An Empty String."""
    if text is None:
        return ""
    return html.escape(str(text), quote=True)


def escape_markdown(text: Optional[str]) -> str:
    """Escape Text For parse_mode=MarkdownV2."""
    if text is None:
        return ""
    return telegram_escape_markdown(str(text), version=2)


def cut_down_text(text: str, limit: int = 100) -> str:
    """
    Keep Only The First Line Of A Text, Cut To A Length Limit.

    Args:
        text: Commit Message Or Similar Multi-Line Text
        limit: Maximum Characters Kept From The First Line

    Returns:
        The Shortened Text With "..." Appended When Anything Was Dropped
    """
    cut = text.split("\n")[0][:limit]
    if cut != text:
        cut += "..."
    return cut


def truncate(text: str, limit: int = 50) -> str:
    """Shorten To limit Characters, Ending With "..." When Cut."""
    if len(text) > limit:
        return text[:limit - 3] + "..."
    return text


def quote_body(body: Optional[str], limit: int = 1000, url: Optional[str] = None,
               label: Optional[str] = None) -> str:
    """
    Render A Markdown Body As A Preformatted HTML Block.

    Args:
        body: Issue, Pull Request Or Comment Body
        limit: Maximum Characters Quoted
        url: Link Offered When The Body Was Cut
        label: Link Text, e.g. "View Full Pull Request"

    Returns:
        The Quoted Block Prefixed With A Blank Line, Or "" For An Empty Body
    """
    if not body:
        return ""

    block = f"\n\n<pre><code>{escape_html(body[:limit])}"
    if len(body) > limit:
        block += "...</code></pre>"
        if url and label:
            block += f"\n\n<a href=\"{url}\">{label}</a>"
    else:
        block += "</code></pre>"
    return block

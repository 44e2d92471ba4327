"""Text escaping utilities for Pluma.

Example:
    >>> from pluma.utils.text import escape_text
    >>> escape_text("a < b")
    'a &lt; b'
"""

from __future__ import annotations

import html as html_module


def escape_text(text: str) -> str:
    """Escape HTML special characters in body text.

    Escapes <, >, &, " but NOT single quotes, which are harmless outside
    attribute values.

    Examples:
        >>> escape_text('say "hi" & <wave>')
        'say &quot;hi&quot; &amp; &lt;wave&gt;'
    """
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text safe for use in attribute values

    Examples:
        >>> escape_html('a "quoted" role')
        'a &quot;quoted&quot; role'
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    return escaped.replace("'", "&#x27;")

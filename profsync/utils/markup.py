# Role: Converts the model's asterisk-based markdown into the loose HTML fragment the web client renders.
# These are ordered blind substitutions, not a parser: list items are never closed and
# the output is kept byte-compatible with what existing clients already display.

from __future__ import annotations

import re

# Whitespace and "." as the legacy rules define them; Python's \s and . differ on a few code points.
_SPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
_SAME_LINE = r"[^\n\r\u2028\u2029]"

_RULES = (
    (re.compile(rf"\*\*{_SPACE}*"), "<strong> "),
    (re.compile(r"\*\*\Z"), "</strong> "),
    (re.compile(rf"\*{_SPACE}"), "<li> "),
    (re.compile(r"(\*\*)\Z"), "</li> "),
    (re.compile(rf"<strong>({_SAME_LINE}*?)<strong>"), r"<strong> \1 </strong>"),
)


def to_html(text: str) -> str:
    html = text
    for pattern, replacement in _RULES:
        html = pattern.sub(replacement, html)

    # Wrap in a list container only when at least one item was produced.
    if "<li> " in html:
        html = f"<ul> {html} </ul>"

    return html

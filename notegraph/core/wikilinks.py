from __future__ import annotations

import html
import re
from urllib.parse import quote

# [[Title]], non-greedy, single line. No nesting or escaping: "[[a]]]]" captures "a".
WIKILINK_RE = re.compile(r"\[\[(.*?)\]\]")


def extract_links(content: str) -> list[str]:
    """
    Return every [[...]] target in order of appearance.

    Duplicates are kept and nothing is stripped or validated, so "[[]]"
    yields "" and "[[ A ]]" yields " A ".
    """
    if not content:
        return []
    return [m.group(1) for m in WIKILINK_RE.finditer(content)]


def wikilinks_to_html(markdown_text: str) -> str:
    """
    Convert wikilinks into HTML <a> tags.

    [[Note]] -> <a class="note-link" href="note://Note">Note</a>
    """
    if not markdown_text:
        return markdown_text

    def replacer(match: re.Match) -> str:
        title = match.group(1)
        href = "note://" + quote(title, safe="")
        label = html.escape(title, quote=False)
        return f'<a class="note-link" href="{href}">{label}</a>'

    return WIKILINK_RE.sub(replacer, markdown_text)

from __future__ import annotations

import bleach

PREVIEW_TAGS = [
    "a", "p", "br", "hr",
    "strong", "em", "del", "code", "pre", "blockquote",
    "ul", "ol", "li",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "table", "thead", "tbody", "tr", "th", "td",
]
PREVIEW_ATTRS = {
    # class carries "note-link" from wikilinks_to_html
    "a": ["href", "title", "class"],
    "th": ["align"], "td": ["align"],
}
# note:// is how the preview points at another note
PREVIEW_PROTOCOLS = ["http", "https", "mailto", "note"]


def clean_preview_html(rendered_html: str) -> str:
    """Drop every tag, attribute and link scheme a note preview has no use for."""
    return bleach.clean(
        rendered_html,
        tags=PREVIEW_TAGS,
        attributes=PREVIEW_ATTRS,
        protocols=PREVIEW_PROTOCOLS,
        strip=True,
    )

from __future__ import annotations

import markdown as md

from notegraph.core.sanitize import clean_preview_html
from notegraph.core.wikilinks import wikilinks_to_html

PAGE_TEMPLATE = """\
<html>
<head>
  <meta charset="utf-8"/>
  <style>
    body {{ font-family: sans-serif; padding: 16px; line-height: 1.5; }}
    code, pre {{ background: #f5f5f5; }}
    pre {{ padding: 12px; overflow-x: auto; }}
    a.note-link {{ color: #4A86E8; text-decoration: none; }}
    a.note-link:hover {{ text-decoration: underline; }}
  </style>
</head>
<body>{body}</body>
</html>
"""


class MarkdownRenderer:
    def __init__(self, *, extensions: list[str] | None = None):
        self.extensions = extensions or ["fenced_code", "tables"]

    def render_fragment(self, text: str) -> str:
        rendered = md.markdown(wikilinks_to_html(text or ""), extensions=self.extensions)
        return clean_preview_html(rendered)

    def render_page(self, text: str) -> str:
        return PAGE_TEMPLATE.format(body=self.render_fragment(text))

# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import html
import logging

import markdown

log = logging.getLogger("n4.utils.text")

MARKDOWN_EXTENSIONS = ["extra", "fenced_code", "tables"]


def markdown_to_html(md_text: str) -> str:
    """
    Convert markdown to HTML. Never raises: if the engine fails the text is
    returned escaped inside a <pre> block.
    """
    try:
        return markdown.markdown(md_text or "", extensions=MARKDOWN_EXTENSIONS)
    except Exception as e:  # pragma: no cover - engine is best-effort
        log.warning("Markdown conversion failed: %s", e)
        return f"<pre>{html.escape(md_text or '')}</pre>"

"""Heuristic markdown formatting for assistant replies."""

from __future__ import annotations

import re

EMPHASIZED_TERM = "**Cardiomegaly**"

_TERM_PATTERN = re.compile(r"cardiomegaly", re.IGNORECASE)
_EMPHASIZED_TERM_PATTERN = re.compile(r"\*\*cardiomegaly\*\*", re.IGNORECASE)

_LEAD_INS = (
    r"can result from various factors, including:|can be caused by:|can include:"
)
_LEAD_IN_PATTERN = re.compile(rf"({_LEAD_INS})", re.IGNORECASE)
_LEAD_IN_ITEM_PATTERN = re.compile(rf"({_LEAD_INS})\s+([^-\n])", re.IGNORECASE)

# ". Some clause: " -> bulleted, emphasized list item. Also matches colon
# clauses that have nothing to do with lists.
_CLAUSE_PATTERN = re.compile(r"\.\s+([A-Z][^.\n]+?):\s+")

_BULLET_MARKER = "- "


def emphasize_terms(text: str) -> str:
    """Wrap every occurrence of the bare term unless it is already emphasized."""
    if _TERM_PATTERN.search(text) and not _EMPHASIZED_TERM_PATTERN.search(text):
        text = _TERM_PATTERN.sub(EMPHASIZED_TERM, text)
    return text


def format_lists(text: str) -> str:
    """Turn an inline "can include: A. B: ..." answer into a bulleted list."""
    if "factors" not in text and "include" not in text:
        return text
    if not _LEAD_IN_PATTERN.search(text) or _BULLET_MARKER in text:
        return text

    text = _LEAD_IN_ITEM_PATTERN.sub(r"\1\n\n- \2", text, count=1)
    return _CLAUSE_PATTERN.sub(r".\n\n- **\1**: ", text)


def format_reply(text: str) -> str:
    """Apply the reply formatting rules in order.

    Not idempotent: running it twice on list-shaped text can differ from
    running it once.
    """
    text = emphasize_terms(text)
    return format_lists(text)

from __future__ import annotations

from typing import Optional

THINK_OPEN = "<think>"
THINK_CLOSE = "</think>"
# Also catches truncated openers such as "<think" or "<thinking ...".
THINK_PREFIX = "<think"


def strip_reasoning(raw: Optional[str]) -> str:
    """
    Remove a reasoning model's ``<think>...</think>`` preamble from generated text.

    - With an opening tag and a later closing tag, everything up to and including the
      closing tag is dropped.
    - With an opening tag and no usable closing tag, everything from the opening tag on
      is dropped.
    - If what remains still starts with a partial ``<think`` tag, its first line is dropped.

    Clean text comes back trimmed and otherwise unchanged.
    """
    text = raw or ""

    start = text.find(THINK_OPEN)
    if start != -1:
        end = text.find(THINK_CLOSE)
        if end != -1 and end > start:
            text = text[end + len(THINK_CLOSE):]
        else:
            text = text[:start]
    text = text.strip()

    if text.startswith(THINK_PREFIX):
        newline = text.find("\n")
        if newline != -1:
            text = text[newline + 1:].strip()

    return text

"""Turn a model's free-form reply into at most three use-case records.

The reply is expected to hold blank-line separated blocks of the form::

    HEADING: AI Can <headline>
    DESCRIPTION: <text>

Blocks that miss either marker fall back to heuristics, so parsing never
fails; a malformed block still yields a record.
"""
from __future__ import annotations
import re
from typing import Iterable

from usecase_generator.common.schema import UseCase

MAX_USE_CASES = 3
TITLE_PREFIX = "AI Can"
DEFAULT_TITLE = "AI Can Transform Your Business"

_BLOCK_SPLIT = re.compile(r"\n\n+")
_HEADING = re.compile(r"HEADING:\s*(AI Can[\s\S]*?)(?:\n|\Z)", re.IGNORECASE)
_DESCRIPTION = re.compile(r"DESCRIPTION:\s*([\s\S]*?)(?:\n\n|\Z)", re.IGNORECASE)
_DESCRIPTION_LABEL = re.compile(r"^(?:DESCRIPTION:\s*)+", re.IGNORECASE)
_HEADING_MARKER = re.compile(r"HEADING:", re.IGNORECASE)


def split_blocks(content: str) -> list[str]:
    """Split text on blank lines, dropping blocks that are only whitespace."""
    text = content.replace("\r\n", "\n")
    return [b for b in _BLOCK_SPLIT.split(text) if b.strip()]


def _drop_heading_markers(text: str) -> str:
    """Cut each line at a HEADING: marker; lines left empty are dropped."""
    kept = []
    for line in text.split("\n"):
        m = _HEADING_MARKER.search(line)
        if m:
            line = line[:m.start()].rstrip()
            if not line.strip():
                continue
        kept.append(line)
    return "\n".join(kept)


def _clean_description(text: str) -> str:
    # Removing a label can expose a marker line, so repeat until nothing changes.
    while True:
        cleaned = _DESCRIPTION_LABEL.sub("", _drop_heading_markers(text).strip()).strip()
        if cleaned == text:
            return cleaned
        text = cleaned


def parse_block(block: str, index: int) -> UseCase:
    """
    Extract one use case from a single block.

    Args:
        block: One blank-line delimited segment of the reply.
        index: 1-based position of the block.
    """
    heading = DEFAULT_TITLE
    description = block

    heading_match = _HEADING.search(block)
    if heading_match:
        heading = heading_match.group(1).strip()
    else:
        lines = block.split("\n")
        if lines[0].strip().startswith(TITLE_PREFIX):
            heading = lines[0].strip()
            description = "\n".join(lines[1:]).strip()

    desc_match = _DESCRIPTION.search(block)
    if desc_match and desc_match.group(1):
        description = desc_match.group(1).strip()

    if not heading.startswith(TITLE_PREFIX):
        heading = f"{TITLE_PREFIX} {heading}"

    return UseCase(id=index, title=heading, description=_clean_description(description))


def parse_use_cases(content: str | None) -> list[UseCase]:
    """
    Parse a model reply into up to MAX_USE_CASES records, in reply order.

    Args:
        content: Full text of the model reply; None is treated as empty.

    Returns:
        Between 0 and MAX_USE_CASES use cases with ids 1..n.
    """
    blocks = split_blocks(content or "")[:MAX_USE_CASES]
    return [parse_block(block, i) for i, block in enumerate(blocks, start=1)]


def render_use_cases(use_cases: Iterable[UseCase]) -> str:
    """Rebuild the HEADING/DESCRIPTION marker text for a list of use cases."""
    return "\n\n".join(
        f"HEADING: {uc.title}\nDESCRIPTION: {uc.description}" for uc in use_cases
    )

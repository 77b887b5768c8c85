"""Prompt templating helpers."""
from __future__ import annotations
import logging
from pathlib import Path

LOGGER = logging.getLogger("usecase.common.templates")

PLACEHOLDER = "{{website}}"

DEFAULT_TEMPLATE = """Analyze the website {{website}} in real time and identify three innovative, practical, and relevant AI use cases for this company that can drive significant business growth.

For each use case:
1. Create a concise headline starting with "AI Can" that captures the essence of the use case (e.g., "AI Can Personalize Customer Journeys")
2. Provide a brief description of how this AI solution would benefit the business

Format each use case as:
HEADING: [Your "AI Can" headline]
DESCRIPTION: [Your description]

Only include these three use cases without any additional explanation.
"""


def load_template(path: str = "configs/usecase_prompt.txt") -> str:
    """
    Load a prompt template file.

    Args:
        path: Path to template.
    """
    return Path(path).read_text(encoding="utf-8")


def load_prompt_template(path: str) -> str:
    """Read the template at path, falling back to DEFAULT_TEMPLATE if unreadable or lacking {{website}}."""
    try:
        template = load_template(path)
    except OSError as e:
        LOGGER.warning("Failed to read prompt template %s: %s", path, e)
        return DEFAULT_TEMPLATE
    if PLACEHOLDER not in template:
        LOGGER.warning("Prompt template %s lacks %s; using default", path, PLACEHOLDER)
        return DEFAULT_TEMPLATE
    return template


def render_prompt(template: str, website: str | None) -> str:
    """
    Render the caller's website into the template.

    Args:
        template: Template content containing {{website}}.
        website: Website submitted by the caller; None renders as empty.

    Returns:
        Rendered prompt.
    """
    return template.replace(PLACEHOLDER, website or "")

"""
Template name constants.

Pure constants - no I/O or file system knowledge.
"""

from types import MappingProxyType
from typing import Mapping

from ...domain.models import StepKind


class Template:
    """Template name constants. Use these instead of raw strings."""

    SYSTEM = "system"
    CLEAN_TEXT = "clean_text"
    SUMMARIZE = "summarize"
    EXTRACT_KEY_POINTS = "extract_key_points"
    TAG_CATEGORY = "tag_category"


# One instruction template per step kind. Adding a StepKind without an entry
# here fails at import (see loader._validate_templates).
STEP_TEMPLATES: Mapping[StepKind, str] = MappingProxyType({
    StepKind.CLEAN_TEXT: Template.CLEAN_TEXT,
    StepKind.SUMMARIZE: Template.SUMMARIZE,
    StepKind.EXTRACT_KEY_POINTS: Template.EXTRACT_KEY_POINTS,
    StepKind.TAG_CATEGORY: Template.TAG_CATEGORY,
})

from .loader import render, render_step_instructions
from .templates import STEP_TEMPLATES, Template

__all__ = [
    "STEP_TEMPLATES",
    "Template",
    "render",
    "render_step_instructions",
]

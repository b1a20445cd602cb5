"""
Simple Jinja2 template loader for prompts.

Loads .jinja2 templates from the templates directory and renders them
with provided context variables.
"""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ...domain.models import StepKind
from .templates import STEP_TEMPLATES, Template

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _validate_templates():
    """Validate every template constant has a file and every StepKind a template. Fails fast at import."""
    for name in dir(Template):
        if not name.startswith("_"):
            template_name = getattr(Template, name)
            path = TEMPLATES_DIR / f"{template_name}.jinja2"
            if not path.exists():
                raise FileNotFoundError(f"Template missing: {path}")

    missing = [kind.value for kind in StepKind if kind not in STEP_TEMPLATES]
    if missing:
        raise LookupError(f"No prompt template for step kinds: {missing}")


_validate_templates()


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    """Create and cache the Jinja2 environment."""
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(default=False),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render(template_name: str, **context) -> str:
    """
    Load and render a Jinja2 template.

    Args:
        template_name: Name of the template file (without .jinja2 extension)
        **context: Variables to pass to the template

    Returns:
        Rendered template string
    """
    env = _get_environment()
    template = env.get_template(f"{template_name}.jinja2")
    return template.render(**context)


def render_step_instructions(kind: StepKind, text: str) -> str:
    """Render the user-turn instructions for one step kind applied to text."""
    return render(STEP_TEMPLATES[kind], text=text)

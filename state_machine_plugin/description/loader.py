"""
Jinja2 loader for the caller-facing documents shipped with the package.

Templates are read through the package's own resources, so they resolve the
same way from a source checkout and from an installed wheel. Rendering is
strict: a variable the caller forgot to pass raises instead of rendering blank.
"""

from enum import Enum
from functools import lru_cache

from jinja2 import Environment, PackageLoader, StrictUndefined


class DocumentTemplate(str, Enum):
    """Shipped templates, by file name under `templates/`."""
    USAGE_GUIDE = "usage_guide.jinja2"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    # Output is Markdown, so autoescaping stays off
    return Environment(
        loader=PackageLoader("state_machine_plugin.description", "templates"),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _check_templates_shipped() -> None:
    """Fail at import if a declared template is missing from the package data."""
    available = set(get_environment().list_templates())
    missing = [t.value for t in DocumentTemplate if t.value not in available]
    if missing:
        raise FileNotFoundError(f"Templates missing from package data: {', '.join(missing)}")


_check_templates_shipped()


def render(template: DocumentTemplate, **context) -> str:
    """Render a shipped template. Raises jinja2.UndefinedError on a missing variable."""
    return get_environment().get_template(template.value).render(**context)

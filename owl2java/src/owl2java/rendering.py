from __future__ import annotations

import os
from functools import lru_cache

from jinja2 import Environment, FileSystemLoader

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "jinja")


class JinjaRenderer:
    """Renderer for generating Java code using Jinja2 templates."""

    def __init__(self, template_dir: str = TEMPLATE_DIR):
        """
        Initialize the renderer.
        :param template_dir: Directory containing Jinja2 templates.
        """
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def render(self, template_name: str, **context) -> str:
        """
        Render a template with the given context.
        :param template_name: Name of the template file.
        :param context: Keyword arguments for the template context.
        :return: Rendered string.
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


@lru_cache(maxsize=None)
def default_renderer() -> JinjaRenderer:
    """The renderer over the templates shipped with this package."""
    return JinjaRenderer()

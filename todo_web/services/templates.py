"""
Template loading and rendering for the to-do pages.

Templates are read from disk on every request so edits show up without a
restart; nothing is cached.
"""

from pathlib import Path
from typing import Any, Mapping

import jinja2

from ..errors import TemplateLoadError, TemplateSyntaxError

_env = jinja2.Environment(
    autoescape=True,
    undefined=jinja2.StrictUndefined,
)


class FileTemplateStore:
    def __init__(self, directory):
        self.directory = Path(directory)

    def load(self, name: str) -> str:
        path = self.directory / name
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateLoadError(f"Could not load template {path}: {e}") from e


def render(template_text: str, context: Mapping[str, Any]) -> str:
    """
    Render ``template_text`` with ``context``.

    Raises TemplateSyntaxError when the template does not compile or uses a
    name the context does not provide.
    """
    try:
        template = _env.from_string(template_text)
        return template.render(**context)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateSyntaxError(f"Line {e.lineno}: {e.message}") from e
    except jinja2.UndefinedError as e:
        raise TemplateSyntaxError(str(e)) from e

"""Render the README template with a :class:`~awesome_readme.views.RenderView`.

Templates are Jinja2 files. Optional blocks are gated explicitly in the
template (``is not none`` tests and loops over lists), and undefined names
raise instead of rendering as empty strings, so a template that drifts from
the view shape fails loudly.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from .errors import RenderError, SourceLoadError

if typ.TYPE_CHECKING:
    from .views import RenderView


class ReadmeRenderer:
    """Render a README template from the assembled view object."""

    def __init__(self, template_path: Path) -> None:
        """Load the template at ``template_path``.

        Parameters
        ----------
        template_path : Path
            Jinja template file. Autoescaping is enabled only for ``.html``
            and ``.xml`` templates, so Markdown templates render verbatim.

        Raises
        ------
        SourceLoadError
            If the template file does not exist or cannot be read.
        RenderError
            If the template contains a syntax error.
        """
        self.template_path = template_path
        self.env = Environment(
            loader=FileSystemLoader(str(template_path.parent)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            finalize=_blank_none,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        try:
            self.template = self.env.get_template(template_path.name)
        except TemplateNotFound as exc:
            msg = f"Template '{template_path}' not found."
            raise SourceLoadError(msg) from exc
        except TemplateSyntaxError as exc:
            msg = f"Template '{template_path}' is invalid: {exc}"
            raise RenderError(msg) from exc
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Unable to read template '{template_path}': {exc}"
            raise SourceLoadError(msg) from exc

    def render(self, view: RenderView) -> str:
        """Render ``view`` and return the text, ending with a newline.

        Raises
        ------
        RenderError
            If the template references values the view does not provide.
        """
        context = {"index": view.index, "companies": view.companies}
        try:
            text = self.template.render(**context)
        except TemplateError as exc:
            msg = f"Failed to render '{self.template_path}': {exc}"
            raise RenderError(msg) from exc
        if not text.endswith("\n"):
            text += "\n"
        return text


def _blank_none(value: object) -> object:
    """Render absent optional fields as empty text instead of ``None``."""
    return "" if value is None else value


__all__ = ["ReadmeRenderer"]

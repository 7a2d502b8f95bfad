"""README rendering pipeline.

This module wires the YAML sources, view builders and template renderer into
the single run that produces the awesome-list README. The main entry point is
``ReadmeBuilder``:

>>> from awesome_readme.builder import ReadmeBuilder
>>> from awesome_readme.config import GeneratorConfig
>>> output_path = ReadmeBuilder(GeneratorConfig()).run()  # doctest: +SKIP
>>> print(output_path)  # doctest: +SKIP
README.generated.md

Steps run strictly in order: companies, template, modules, views, render,
write. The output file is only touched once rendering has succeeded, so a
failed run leaves the previous README in place.
"""

from __future__ import annotations

import typing as typ

from .errors import SourceLoadError
from .renderer import ReadmeRenderer
from .sources import load_yaml
from .views import RenderView, build_companies_view, build_modules_view

if typ.TYPE_CHECKING:
    from pathlib import Path

    import requests

    from .config import GeneratorConfig


class ReadmeBuilder:
    """Render the README from the module catalog and companies list."""

    def __init__(
        self, config: GeneratorConfig, *, session: requests.Session | None = None
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : GeneratorConfig
            Source, template and output locations for the run.
        session : requests.Session, optional
            Session used when the companies list is fetched remotely.
        """
        self.config = config
        self.session = session

    def build_view(self) -> tuple[ReadmeRenderer, RenderView]:
        """Load every source and return the renderer with its view."""
        companies_raw = load_yaml(
            self.config.companies_source,
            remote=self.config.remote_companies,
            session=self.session,
            timeout=self.config.timeout,
        )
        renderer = ReadmeRenderer(self.config.template_path)
        modules_raw = load_yaml(self.config.modules_path)
        view = RenderView(
            index=build_modules_view(modules_raw),
            companies=build_companies_view(companies_raw),
        )
        return renderer, view

    def render(self) -> str:
        """Return the rendered README text without writing it."""
        renderer, view = self.build_view()
        return renderer.render(view)

    def run(self) -> Path:
        """Render and write the README, returning the output path.

        Raises
        ------
        ReadmeError
            Any load, parse, render or write failure; the output file is left
            untouched unless rendering succeeded.
        """
        text = self.render()
        output_path = self.config.output_path
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            msg = f"Unable to write '{output_path}': {exc}"
            raise SourceLoadError(msg) from exc
        return output_path


__all__ = ["ReadmeBuilder"]

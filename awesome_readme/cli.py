"""Cyclopts CLI entrypoint for regenerating the awesome-list README.

The ``awesome-readme`` console script reads ``modules.yml`` and
``companies.yml`` from the working directory, renders the bundled Markdown
template and writes ``README.generated.md``. Every option can also be set
through an ``INPUT_*`` environment variable (for example ``INPUT_OUTPUT``)
so the command drops into CI workflows unchanged.

Examples
--------
Render with the default paths:

>>> from awesome_readme.cli import main
>>> main([])  # doctest: +SKIP
wrote README.generated.md

Write the README somewhere else, fetching companies from the site repo:

>>> main(["--output", "README.md", "--remote-companies"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import (
    COMPANIES_URL,
    DEFAULT_COMPANIES_PATH,
    DEFAULT_MODULES_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TEMPLATE_PATH,
    DEFAULT_TIMEOUT,
)
from .builder import ReadmeBuilder
from .config import GeneratorConfig
from .errors import ReadmeError

app = App(
    name="awesome-readme",
    help="Render the awesome-list README from the module catalog.",
    config=cyclopts.config.Env("INPUT_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def generate(
    *,
    modules: typ.Annotated[
        Path, Parameter(help="Path to the module catalog YAML")
    ] = DEFAULT_MODULES_PATH,
    companies: typ.Annotated[
        Path, Parameter(help="Path to the local companies YAML")
    ] = DEFAULT_COMPANIES_PATH,
    template: typ.Annotated[
        Path, Parameter(help="Path to the README Jinja template")
    ] = DEFAULT_TEMPLATE_PATH,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the rendered README")
    ] = DEFAULT_OUTPUT_PATH,
    remote_companies: typ.Annotated[
        bool, Parameter(help="Fetch the companies list from --companies-url")
    ] = False,
    companies_url: typ.Annotated[
        str, Parameter(help="Remote companies YAML document")
    ] = COMPANIES_URL,
    timeout: typ.Annotated[
        float, Parameter(help="HTTP timeout in seconds for remote fetches")
    ] = DEFAULT_TIMEOUT,
) -> None:
    """Render the README and report the written path.

    Parameters
    ----------
    modules : Path, optional
        Module catalog (``INPUT_MODULES``).
    companies : Path, optional
        Local companies list (``INPUT_COMPANIES``); ignored when
        ``remote_companies`` is set.
    template : Path, optional
        Jinja template (``INPUT_TEMPLATE``); defaults to the bundled
        ``readme.md.jinja``.
    output : Path, optional
        Output file (``INPUT_OUTPUT``), overwritten on success.
    remote_companies : bool, optional
        Fetch companies from ``companies_url`` instead of the local file.
    companies_url : str, optional
        URL of the remote companies YAML.
    timeout : float, optional
        Timeout for the remote fetch.

    Raises
    ------
    ReadmeError
        When any pipeline stage fails; :func:`main` turns this into exit
        status 1.
    """
    config = GeneratorConfig(
        modules_path=modules,
        companies_path=companies,
        template_path=template,
        output_path=output,
        remote_companies=remote_companies,
        companies_url=companies_url,
        timeout=timeout,
    )
    written = ReadmeBuilder(config).run()
    print(f"wrote {_format_path(written)}")


def main(argv: list[str] | None = None) -> None:
    """Invoke the Cyclopts application behind the ``awesome-readme`` command.

    Parameters
    ----------
    argv : list[str] or None, optional
        Arguments to parse; ``None`` reads ``sys.argv``.

    Raises
    ------
    SystemExit
        With status 1 after printing the error when generation fails.
    """
    command, bound, _ignored = app.parse_args(argv)
    try:
        command(*bound.args, **bound.kwargs)
    except ReadmeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

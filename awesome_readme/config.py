"""Resolved settings for a single README generation run."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from ._constants import (
    COMPANIES_URL,
    DEFAULT_COMPANIES_PATH,
    DEFAULT_MODULES_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TEMPLATE_PATH,
    DEFAULT_TIMEOUT,
)


@dc.dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Input, template and output locations used by :class:`ReadmeBuilder`.

    Attributes
    ----------
    modules_path : Path
        Module catalog YAML file.
    companies_path : Path
        Local companies YAML file, read unless ``remote_companies`` is set.
    template_path : Path
        Jinja template rendered into the README.
    output_path : Path
        Destination file, overwritten on every run.
    remote_companies : bool
        Fetch the companies list from ``companies_url`` instead of disk.
    companies_url : str
        Remote companies YAML document.
    timeout : float
        Per-request timeout in seconds for the remote fetch.
    """

    modules_path: Path = DEFAULT_MODULES_PATH
    companies_path: Path = DEFAULT_COMPANIES_PATH
    template_path: Path = DEFAULT_TEMPLATE_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH
    remote_companies: bool = False
    companies_url: str = COMPANIES_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def companies_source(self) -> str | Path:
        """Return the location the companies list is read from."""
        return self.companies_url if self.remote_companies else self.companies_path


__all__ = ["GeneratorConfig"]

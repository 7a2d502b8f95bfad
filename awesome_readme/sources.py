"""Read YAML data sources and template text from disk or over HTTP.

The generator consumes two YAML documents, the module catalog and the
companies list, plus a template. This module hides where the bytes come from
(local file or remote URL) and turns every transport or parse failure into
the package's own :mod:`awesome_readme.errors` categories.

Examples
--------
>>> from pathlib import Path
>>> from awesome_readme.sources import load_yaml
>>> catalog = load_yaml(Path("modules.yml"))  # doctest: +SKIP
>>> sorted(catalog)[:1]  # doctest: +SKIP
['api-gateway']
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import requests
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_TIMEOUT
from .errors import SourceLoadError, SourceParseError


def load_yaml(
    location: str | Path,
    *,
    remote: bool = False,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> typ.Any:
    """Fetch a YAML document and parse it into plain Python values.

    Parameters
    ----------
    location : str or Path
        Filesystem path, or the URL to GET when ``remote`` is true.
    remote : bool, optional
        Fetch ``location`` over HTTP instead of reading it from disk.
    session : requests.Session, optional
        Session used for remote fetches; a fresh one is created when omitted.
    timeout : float, optional
        Per-request timeout in seconds for remote fetches.

    Returns
    -------
    Any
        Nested dicts, lists and scalars, or ``None`` for an empty document.

    Raises
    ------
    SourceLoadError
        If the file cannot be read or the URL cannot be fetched.
    SourceParseError
        If the payload is not valid YAML.
    """
    if remote:
        payload = _fetch_remote(str(location), session=session, timeout=timeout)
    else:
        payload = load_text(Path(location))
    return parse_yaml(payload, origin=str(location))


def parse_yaml(payload: str, *, origin: str = "<string>") -> typ.Any:
    """Parse ``payload`` with the safe loader using YAML 1.1 semantics."""
    loader = YAML(typ="safe", pure=True)
    loader.version = (1, 1)
    try:
        return loader.load(payload)
    except YAMLError as exc:
        msg = f"Invalid YAML in '{origin}': {exc}"
        raise SourceParseError(msg) from exc


def load_text(path: Path) -> str:
    """Return the UTF-8 contents of ``path``.

    Raises
    ------
    SourceLoadError
        If the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unable to read '{path}': {exc}"
        raise SourceLoadError(msg) from exc


def _fetch_remote(
    url: str, *, session: requests.Session | None, timeout: float
) -> str:
    """GET ``url`` and return the response body as text."""
    client = session or requests.Session()
    try:
        response = client.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        msg = f"Failed to fetch '{url}': {exc}"
        raise SourceLoadError(msg) from exc
    finally:
        if session is None:
            client.close()
    return response.text


__all__ = ["load_text", "load_yaml", "parse_yaml"]

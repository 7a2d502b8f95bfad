from __future__ import annotations

import typing as typ

import pytest

from awesome_readme.cli import generate, main
from awesome_readme.config import GeneratorConfig

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write_sources(tmp_path: Path) -> tuple[Path, Path]:
    modules = tmp_path / "modules.yml"
    modules.write_text(
        "tools:\n  title: Dev Tools\n  entries:\n    - name: repl\n      link: r\n",
        encoding="utf-8",
    )
    companies = tmp_path / "companies.yml"
    companies.write_text("a:\n  - name: Acme\n    link: https://acme\n", encoding="utf-8")
    return modules, companies


def test_generate_writes_output_and_reports_path(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    modules, companies = _write_sources(tmp_path)
    output = tmp_path / "README.md"

    generate(modules=modules, companies=companies, output=output)

    assert "## Dev Tools" in output.read_text(encoding="utf-8")
    assert capsys.readouterr().out.strip() == f"wrote {output}"


def test_main_exits_with_status_one_on_failure(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _modules, companies = _write_sources(tmp_path)
    output = tmp_path / "README.md"

    with pytest.raises(SystemExit) as excinfo:
        main(
            [
                "--modules",
                str(tmp_path / "missing.yml"),
                "--companies",
                str(companies),
                "--output",
                str(output),
            ]
        )

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("error: "), f"expected an error line on stderr, got {err!r}"
    assert "missing.yml" in err
    assert not output.exists()


def test_main_reads_options_from_input_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    modules, companies = _write_sources(tmp_path)
    output = tmp_path / "from-env.md"
    monkeypatch.setenv("INPUT_OUTPUT", str(output))

    main(["--modules", str(modules), "--companies", str(companies)])

    assert output.exists(), "expected INPUT_OUTPUT to select the output file"
    assert "- [Acme](https://acme)" in output.read_text(encoding="utf-8")


def test_main_fetches_companies_remotely_when_requested(
    tmp_path: Path, mocker: typ.Any
) -> None:
    modules, _companies = _write_sources(tmp_path)
    output = tmp_path / "README.md"
    session = mocker.Mock()
    session.get.return_value = mocker.Mock(
        text="tier:\n  - name: Remote Co\n    link: https://remote\n"
    )
    mocker.patch("awesome_readme.sources.requests.Session", return_value=session)

    main(
        [
            "--modules",
            str(modules),
            "--companies",
            str(tmp_path / "unused.yml"),
            "--output",
            str(output),
            "--remote-companies",
            "--companies-url",
            "https://example.invalid/companies.yml",
            "--timeout",
            "2.5",
        ]
    )

    session.get.assert_called_once_with(
        "https://example.invalid/companies.yml", timeout=2.5
    )
    session.close.assert_called_once_with()
    text = output.read_text(encoding="utf-8")
    assert "- [Remote Co](https://remote)" in text
    assert "Acme" not in text


def test_companies_source_follows_remote_switch(tmp_path: Path) -> None:
    local = tmp_path / "companies.yml"
    assert GeneratorConfig(companies_path=local).companies_source == local
    remote = GeneratorConfig(
        companies_path=local,
        remote_companies=True,
        companies_url="https://example.invalid/c.yml",
    )
    assert remote.companies_source == "https://example.invalid/c.yml"

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

import rmlIngest.cli.__main__ as cli


def test_detect_prints_format_and_base(mappings_dir: Path, quiet_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [
            "--config",
            str(quiet_config),
            "detect",
            str(mappings_dir / "people.ttl"),
            str(mappings_dir / "people.json-ld"),
        ],
    )
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].split() == ["File", "Format", "Base", "URI"]
    people = next(line for line in lines if "people.ttl" in line)
    assert "turtle" in people
    assert "http://example.com/mapping/" in people
    jsonld = next(line for line in lines if "people.json-ld" in line)
    assert "json-ld" in jsonld


def test_resolve_prints_absolute_location(mappings_dir: Path, quiet_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["--config", str(quiet_config), "resolve", "joined.ttl", "--search-root", str(mappings_dir)],
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == str((mappings_dir / "joined.ttl").resolve())


def test_resolve_from_package_resources(quiet_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["--config", str(quiet_config), "resolve", "mapping/namespaces.py", "--package", "rmlIngest"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip().endswith("namespaces.py")


def test_resolve_missing_token_fails(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["resolve", "nowhere.ttl", "--search-root", str(tmp_path)])
    assert result.exit_code == 1
    assert "nowhere.ttl can't be found." in result.output
    event = json.loads(next(line for line in result.output.splitlines() if line.startswith("{")))
    assert event["event"] == "resolve"
    assert event["status"] == "not_found"


def test_load_prints_a_summary(mappings_dir: Path, quiet_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["--config", str(quiet_config), "load", "joined.ttl", "--search-root", str(mappings_dir)],
    )
    assert result.exit_code == 0, result.output
    assert "format: turtle" in result.output
    assert "base: http://example.com/joined/" in result.output
    assert "#EmployeeMapping" in result.output
    assert "joined" in result.output
    assert "employees.csv" in result.output


def test_load_json_output(mappings_dir: Path, quiet_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["--config", str(quiet_config), "load", str(mappings_dir / "people.ttl"), "--json"],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["base_uri"] == "http://example.com/mapping/"
    assert data["standard_triples_maps"][0]["logical_source"]["source"] == "people.json"


def test_load_reports_parse_failures(mappings_dir: Path, quiet_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["--config", str(quiet_config), "load", str(mappings_dir / "bad_language.ttl")],
    )
    assert result.exit_code == 1
    assert "invalid language tag" in result.output


def test_lang_command_exit_codes() -> None:
    runner = CliRunner()
    ok = runner.invoke(cli.cli, ["lang", "en-US", "i-klingon"])
    assert ok.exit_code == 0
    assert "en-US\tvalid" in ok.output

    bad = runner.invoke(cli.cli, ["lang", "en-US", "en--US"])
    assert bad.exit_code == 1
    assert "en--US\tinvalid" in bad.output


def test_uri_command_exit_codes() -> None:
    runner = CliRunner()
    ok = runner.invoke(cli.cli, ["uri", "http://example.org/base/"])
    assert ok.exit_code == 0

    bad = runner.invoke(cli.cli, ["uri", "not a uri"])
    assert bad.exit_code == 1
    assert "invalid URIs: not a uri" in bad.output

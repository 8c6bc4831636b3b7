# Copyright 2026 avrots Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the avrots CLI entry point."""

import json
import sys
from pathlib import Path

import pytest

from avrots.cli.main import main

# ###############
# Helpers
# ###############

_PING = {"type": "record", "name": "Ping", "fields": [{"name": "id", "type": "long"}]}
_DANGLING = {"type": "record", "name": "A", "fields": [{"name": "b", "type": "B"}]}


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from an empty directory with no generator variables set."""
    monkeypatch.chdir(tmp_path)
    for name in ("SCHEMA_DIR", "OUT_DIR", "OUT_FILE"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def _write_schema(directory: Path, name: str, schema: object) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_text(json.dumps(schema), encoding="utf-8")


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    """Invoke main() with *argv* and return its exit code."""
    monkeypatch.setattr(sys, "argv", ["avrots", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- generate tests --------


def test_generate_with_defaults(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """generate reads ./schemas and writes ./generated/ts/events.ts."""
    _write_schema(workdir / "schemas", "ping.avsc", _PING)
    assert _run(monkeypatch, "generate") == 0

    output = workdir / "generated" / "ts" / "events.ts"
    assert output.read_text(encoding="utf-8") == (
        "// Generated from Avro schemas in schemas\n"
        "// Single-file output: events.ts\n"
        "\n"
        "// ===== Ping (from ping.avsc) =====\n"
        "// Generated from ping.avsc. Do not edit manually.\n"
        "export interface Ping {\n"
        "  id: number;\n"
        "}\n"
    )
    assert "[OK] Wrote generated/ts/events.ts" in capsys.readouterr().out


def test_generate_with_flags(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_schema(workdir / "avro", "ping.avsc", _PING)
    assert _run(monkeypatch, "generate", "--schema-dir", "avro", "--out-dir", "dist", "--out-file", "types.ts") == 0
    text = (workdir / "dist" / "types.ts").read_text(encoding="utf-8")
    assert text.startswith("// Generated from Avro schemas in avro\n// Single-file output: types.ts\n")


def test_generate_with_environment(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_schema(workdir / "env-in", "ping.avsc", _PING)
    monkeypatch.setenv("SCHEMA_DIR", "env-in")
    monkeypatch.setenv("OUT_DIR", "env-out")
    monkeypatch.setenv("OUT_FILE", "env.ts")
    assert _run(monkeypatch, "generate") == 0
    assert (workdir / "env-out" / "env.ts").exists()


def test_generate_precedence(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Flags beat the environment, which beats the config file."""
    _write_schema(workdir / "from-file", "ping.avsc", _PING)
    (workdir / ".avrots.yaml").write_text(
        "schema-directory: from-file\noutput-directory: file-out\noutput-file: file.ts\n", encoding="utf-8"
    )
    monkeypatch.setenv("OUT_DIR", "env-out")
    assert _run(monkeypatch, "generate", "--out-file", "flag.ts") == 0
    assert (workdir / "env-out" / "flag.ts").exists()
    assert not (workdir / "file-out").exists()


def test_generate_with_explicit_config(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_schema(workdir / "in", "ping.avsc", _PING)
    config = workdir / "conf" / "gen.yaml"
    config.parent.mkdir()
    config.write_text("schema-directory: in\noutput-file: x.ts\n", encoding="utf-8")
    assert _run(monkeypatch, "generate", "--config", str(config)) == 0
    assert (workdir / "generated" / "ts" / "x.ts").exists()


def test_generate_empty_directory_writes_banner(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (workdir / "schemas").mkdir()
    assert _run(monkeypatch, "generate") == 0
    text = (workdir / "generated" / "ts" / "events.ts").read_text(encoding="utf-8")
    assert text == "// Generated from Avro schemas in schemas\n// Single-file output: events.ts\n\n"


def test_generate_missing_schema_dir_fails(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(monkeypatch, "generate") == 1
    assert "Schema directory not found" in capsys.readouterr().err
    assert not (workdir / "generated").exists()


def test_generate_bad_schema_writes_nothing(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_schema(workdir / "schemas", "a.avsc", _PING)
    (workdir / "schemas" / "b.avsc").write_text("{oops", encoding="utf-8")
    assert _run(monkeypatch, "generate") == 1
    assert not (workdir / "generated" / "ts" / "events.ts").exists()


def test_generate_invalid_utf8_fails(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (workdir / "schemas").mkdir()
    (workdir / "schemas" / "bad.avsc").write_bytes(b'{"type": "\xff"}')
    assert _run(monkeypatch, "generate") == 1
    assert "Error: bad.avsc: not valid UTF-8" in capsys.readouterr().err
    assert not (workdir / "generated").exists()


def test_generate_invalid_config_fails(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (workdir / ".avrots.yaml").write_text("- not a mapping\n", encoding="utf-8")
    assert _run(monkeypatch, "generate") == 1
    assert "must be a YAML mapping" in capsys.readouterr().err


def test_generate_prints_warnings_but_succeeds(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write_schema(workdir / "schemas", "a.avsc", _DANGLING)
    assert _run(monkeypatch, "generate") == 0
    assert "Warning: a.avsc: reference to undeclared type 'B'." in capsys.readouterr().out
    assert "  b: B;" in (workdir / "generated" / "ts" / "events.ts").read_text(encoding="utf-8")


def test_generate_strict_fails_on_findings(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write_schema(workdir / "schemas", "a.avsc", _DANGLING)
    assert _run(monkeypatch, "generate", "--strict") == 1
    assert "Error: a.avsc: reference to undeclared type 'B'." in capsys.readouterr().err
    assert not (workdir / "generated").exists()


def test_generate_write_failure(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write_schema(workdir / "schemas", "ping.avsc", _PING)
    (workdir / "blocker").write_text("", encoding="utf-8")
    assert _run(monkeypatch, "generate", "--out-dir", "blocker") == 1
    assert "Error: cannot write" in capsys.readouterr().err


# -------- check tests --------


def test_check_clean(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write_schema(workdir / "schemas", "ping.avsc", _PING)
    assert _run(monkeypatch, "check") == 0
    out = capsys.readouterr().out
    assert "Checking 1 schema file(s)..." in out
    assert "No issues found." in out
    assert not (workdir / "generated").exists()


def test_check_no_files(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (workdir / "schemas").mkdir()
    assert _run(monkeypatch, "check") == 0
    assert "No .avsc files found" in capsys.readouterr().out


def test_check_reports_duplicates(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write_schema(workdir / "schemas", "a.avsc", _PING)
    _write_schema(workdir / "schemas", "b.avsc", _PING)
    assert _run(monkeypatch, "check") == 0
    out = capsys.readouterr().out
    assert "Warning: Type 'Ping' is declared 2 times (in a.avsc, b.avsc)." in out
    assert "No issues found." not in out


def test_check_strict_fails(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_schema(workdir / "schemas", "a.avsc", _PING)
    _write_schema(workdir / "schemas", "b.avsc", _PING)
    assert _run(monkeypatch, "check", "--strict") == 1


def test_check_invalid_utf8_fails(
    workdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (workdir / "schemas").mkdir()
    (workdir / "schemas" / "bad.avsc").write_bytes(b"\xfe\xff")
    assert _run(monkeypatch, "check") == 1
    assert "Error: bad.avsc: not valid UTF-8" in capsys.readouterr().err


def test_check_schema_dir_flag(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_schema(workdir / "avro", "ping.avsc", _PING)
    assert _run(monkeypatch, "check", "--schema-dir", "avro") == 0

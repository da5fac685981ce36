"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsbind import cli
from jsbind.cli import _build_parser
from jsbind.config import JsbindConfig
from jsbind.engine import EngineError


def test_cli_accepts_short_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["-i", "lib.js", "-O", "Lib", "-n", "lib"])
    assert args.input == Path("lib.js")
    assert args.object == "Lib"
    assert args.package == "lib"
    assert args.guard_cycles is None
    assert args.verbose is False


def test_cli_accepts_long_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(
        [
            "--input",
            "lib.js",
            "--object",
            "Lib",
            "--name",
            "lib",
            "--prelude",
            "a.js",
            "--prelude",
            "b.js",
            "--extractor",
            "regex",
            "--no-cycle-guard",
            "--verbose",
        ]
    )
    assert args.prelude == [Path("a.js"), Path("b.js")]
    assert args.extractor == "regex"
    assert args.guard_cycles is False
    assert args.verbose is True


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["-O", "Lib", "-n", "lib"], "Must provide an input file"),
        (["-i", "lib.js", "-n", "lib"], "Must provide library object name"),
        (["-i", "lib.js", "-O", "Lib"], "Must provide binding's package name"),
    ],
)
def test_missing_parameter_exits(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    argv: list[str],
    message: str,
) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 1
    assert message in capsys.readouterr().err


class _StubGenerator:
    calls: list[JsbindConfig] = []
    error: Exception | None = None

    def __init__(self, config: JsbindConfig) -> None:
        self.config = config

    def run(self) -> Path:
        type(self).calls.append(self.config)
        if self.error is not None:
            raise self.error
        return self.config.output_path


def test_main_runs_generator_with_merged_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".jsbind.yml").write_text("package: fromfile\nextractor: regex\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(_StubGenerator, "calls", [])
    monkeypatch.setattr(_StubGenerator, "error", None)
    monkeypatch.setattr(cli, "Generator", _StubGenerator)

    cli.main(["-i", "lib.js", "-O", "Lib", "-n", "lib"])

    config = _StubGenerator.calls[0]
    assert config.package == "lib"
    assert config.extractor == "regex"
    assert "Binding written to lib.go" in capsys.readouterr().out


def test_main_reports_engine_errors(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(_StubGenerator, "calls", [])
    monkeypatch.setattr(_StubGenerator, "error", EngineError("ReferenceError: Lib is not defined"))
    monkeypatch.setattr(cli, "Generator", _StubGenerator)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-i", "lib.js", "-O", "Lib", "-n", "lib"])
    assert excinfo.value.code == 1
    assert "Lib is not defined" in capsys.readouterr().err


def test_log_file_receives_debug_records(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(_StubGenerator, "calls", [])
    monkeypatch.setattr(_StubGenerator, "error", None)
    monkeypatch.setattr(cli, "Generator", _StubGenerator)
    log_file = tmp_path / "logs" / "run.log"

    cli.main(["-i", "lib.js", "-O", "Lib", "-n", "lib", "--log-file", str(log_file)])

    assert "Generating package lib from lib.js" in log_file.read_text(encoding="utf-8")

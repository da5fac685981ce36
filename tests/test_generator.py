"""Tests for the end-to-end generation pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsbind.config import ConfigError, JsbindConfig
from jsbind.engine import EngineError
from jsbind.extract import RegexSignatureExtractor
from jsbind.generator import Generator
from jsbind.render import RenderError
from tests._fixtures.fake_engine import FakeEngine, FakeFunction
from tests._fixtures.library import SAMPLE_OUTPUT


def _config(tmp_path: Path, **overrides: object) -> JsbindConfig:
    source = tmp_path / "lib.js"
    source.write_text("var Lib = {};\n", encoding="utf-8")
    config = JsbindConfig(
        root=tmp_path,
        input=source,
        object="Lib",
        package="lib",
        output_dir=tmp_path / "out",
        extractor="regex",
    )
    return config.merged(**overrides)


def _generator(config: JsbindConfig, engine: FakeEngine) -> Generator:
    return Generator(
        config,
        engine_factory=lambda: engine,
        extractor=RegexSignatureExtractor(),
    )


def test_run_writes_binding_named_after_package(
    tmp_path: Path, sample_engine: FakeEngine
) -> None:
    engine = sample_engine
    output = _generator(_config(tmp_path), engine).run()

    assert output == tmp_path / "out" / "lib.go"
    assert output.read_text(encoding="utf-8") == SAMPLE_OUTPUT
    assert engine.closed is True


def test_prelude_runs_before_input(tmp_path: Path) -> None:
    shim = tmp_path / "shim.js"
    shim.write_text("var process = {};\n", encoding="utf-8")
    config = _config(tmp_path, prelude=[shim])
    engine = FakeEngine({"Lib": {}})

    _generator(config, engine).build()
    assert engine.scripts == ["<prelude>", str(shim), str(config.input)]


def test_missing_object_is_fatal(tmp_path: Path) -> None:
    engine = FakeEngine({})
    with pytest.raises(EngineError):
        _generator(_config(tmp_path), engine).run()
    assert not (tmp_path / "out" / "lib.go").exists()
    assert engine.closed is True


def test_missing_input_file(tmp_path: Path) -> None:
    config = _config(tmp_path, input=tmp_path / "nope.js")
    with pytest.raises(FileNotFoundError):
        _generator(config, FakeEngine({"Lib": {}})).run()


def test_unsupported_return_type_produces_no_file(tmp_path: Path) -> None:
    library = {"isOpen": FakeFunction("function () { /** @return {boolean} */ }")}
    with pytest.raises(RenderError):
        _generator(_config(tmp_path), FakeEngine({"Lib": library})).run()
    assert not (tmp_path / "out" / "lib.go").exists()


@pytest.mark.parametrize("missing", ["object", "package"])
def test_missing_required_parameter(tmp_path: Path, missing: str) -> None:
    config = _config(tmp_path)
    setattr(config, missing, None)
    with pytest.raises(ConfigError):
        _generator(config, FakeEngine({})).run()


def test_nested_helper_annotation_does_not_abort(tmp_path: Path) -> None:
    load = FakeFunction(
        "function (url) { var parse = function (text) { /** @returns {Array} */ "
        "return [text]; }; return parse(url); }"
    )
    output = _generator(_config(tmp_path), FakeEngine({"Lib": {"load": load}})).run()
    assert 'return self.Call("load", url).Interface()' in output.read_text(encoding="utf-8")

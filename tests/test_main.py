"""Tests for the rsspls command line entry point."""

import logging

import pytest

from rsspls import main as main_module
from rsspls.config import Settings
from rsspls.feed.writer import DirectorySink, StdoutSink
from rsspls.main import build_parser, configure_logging, main

CONFIG = """
[[feed]]
title = "Example"
[feed.config]
url = "https://example.com/"
item = "li"
heading = "a"
"""


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "feeds.toml"
    path.write_text(CONFIG, encoding="utf-8")
    return path


class RunRecorder:
    """Stands in for run_sources and records how main called it."""

    def __init__(self, monkeypatch):
        self.monkeypatch = monkeypatch
        self.calls = []

    def install(self, outcome):
        async def run_sources(sources, settings, sink=None):
            self.calls.append({"sources": sources, "settings": settings, "sink": sink})
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        self.monkeypatch.setattr(main_module, "run_sources", run_sources)


@pytest.fixture
def recorder(monkeypatch):
    return RunRecorder(monkeypatch)


def test_success_exit_code(config_path, settings, recorder):
    recorder.install(True)

    assert main(["--config", str(config_path)], settings=settings) == 0
    assert [rule.title for rule in recorder.calls[0]["sources"]] == ["Example"]
    assert isinstance(recorder.calls[0]["sink"], StdoutSink)
    assert recorder.calls[0]["settings"] is settings


def test_source_failure_exit_code(config_path, settings, recorder):
    recorder.install(False)

    assert main(["-c", str(config_path)], settings=settings) == 1


def test_infrastructure_fault_exit_code(config_path, settings, recorder):
    recorder.install(RuntimeError("boom"))

    assert main(["-c", str(config_path)], settings=settings) == 1


def test_config_error_exits_before_fetching(tmp_path, settings, recorder):
    recorder.install(True)

    assert main(["-c", str(tmp_path / "missing.toml")], settings=settings) == 1
    assert recorder.calls == []


def test_output_option_selects_directory_sink(config_path, tmp_path, settings, recorder):
    recorder.install(True)

    main(["-c", str(config_path), "--output", str(tmp_path / "out")], settings=settings)

    sink = recorder.calls[0]["sink"]
    assert isinstance(sink, DirectorySink)
    assert sink.output_dir == tmp_path / "out"


def test_output_from_config_file(tmp_path, settings, recorder):
    recorder.install(True)
    path = tmp_path / "feeds.toml"
    path.write_text('[rsspls]\noutput = "from-config"\n' + CONFIG, encoding="utf-8")

    main(["-c", str(path)], settings=settings)

    assert str(recorder.calls[0]["sink"].output_dir) == "from-config"


def test_config_is_required():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])

    assert excinfo.value.code == 2


@pytest.mark.parametrize("name, level", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("bogus", logging.INFO)])
def test_configure_logging_level(name, level):
    configure_logging(Settings(_env_file=None, log=name))

    assert logging.getLogger().level == level


def test_invalid_environment_exits_before_fetching(config_path, recorder, monkeypatch):
    recorder.install(True)
    monkeypatch.setenv("RSSPLS_FAIL_FAST", "maybe")

    assert main(["-c", str(config_path)]) == 1
    assert recorder.calls == []

"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_populator import ObjectGenerationError, PopulatorBuilder, field, new_populator
from mp_populator.observability import configure_logging, get_logger
from mp_populator.randomizers import StaticRegistryLoader


class Sample:
    count: int


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("tests.logging", component="engine").info("ready")
        assert logs == [{"event": "ready", "component": "engine", "log_level": "info"}]


class TestConfigureLogging:
    def test_json_rendering(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.DEBUG, json=True)
        get_logger("tests.logging.json").info("populator.built", seed=7)
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["event"] == "populator.built"
        assert payload["seed"] == 7
        assert payload["level"] == "info"
        assert payload["logger"] == "tests.logging.json"

    def test_level_filters(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.WARNING)
        get_logger("tests.logging.level").info("hidden")
        assert "hidden" not in capsys.readouterr().err


class TestPopulatorEvents:
    def test_build_logs_seed(self) -> None:
        with capture_logs() as logs:
            new_populator(seed=5)
        built = [entry for entry in logs if entry["event"] == "populator.built"]
        assert len(built) == 1
        assert built[0]["seed"] == 5
        assert built[0]["seeded"] is True
        assert built[0]["log_level"] == "info"

    def test_unseeded_build_logs_generated_seed(self) -> None:
        with capture_logs() as logs:
            populator = new_populator()
        built = next(entry for entry in logs if entry["event"] == "populator.built")
        assert built["seed"] == populator.seed
        assert built["seeded"] is False

    def test_field_failure_logged_as_warning(self) -> None:
        populator = (
            PopulatorBuilder()
            .seed(1)
            .registry_loader(StaticRegistryLoader())
            .randomize(field("count").of_type(int), lambda: 1 / 0)
            .build()
        )
        with capture_logs() as logs, pytest.raises(ObjectGenerationError):
            populator.populate(Sample)
        failed = [entry for entry in logs if entry["event"] == "populate.field_failed"]
        assert len(failed) == 1
        assert failed[0]["log_level"] == "warning"
        assert failed[0]["owner"] == "Sample"
        assert failed[0]["field"] == "count"
        assert failed[0]["path"] == "count"

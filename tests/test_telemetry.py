from __future__ import annotations

from pathlib import Path
from typing import Iterator, List

import pytest

from securepad.runtime import telemetry


@pytest.fixture
def log_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    log_file = tmp_path / "securepad-test.log"
    monkeypatch.setenv("SECUREPAD_LOG_FILE", str(log_file))
    yield log_file
    monkeypatch.undo()
    telemetry.configure()


def test_json_and_buffered_switches_build_a_usable_config(
    monkeypatch: pytest.MonkeyPatch, log_env: Path
) -> None:
    monkeypatch.setenv("SECUREPAD_LOG_JSON", "1")
    monkeypatch.setenv("SECUREPAD_LOG_BUFFERED", "yes")
    monkeypatch.setenv("SECUREPAD_LOG_BUFFER_SIZE", "16")

    telemetry.configure()
    telemetry.record_event("notes.save", data={"reason": "manual", "lines": 3})

    assert telemetry.get_logger() is telemetry.get_logger("securepad")


@pytest.mark.parametrize("preset", ["development", "production"])
def test_presets_are_accepted(preset: str, log_env: Path) -> None:
    telemetry.configure(preset=preset)

    telemetry.record_event("editor.quit", data={"dirty": False})


def test_unknown_preset_is_rejected(log_env: Path) -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_config_and_preset_are_exclusive(log_env: Path) -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_span_reports_failure_and_reraises(
    monkeypatch: pytest.MonkeyPatch, log_env: Path
) -> None:
    reasons: List[str] = []
    monkeypatch.setattr(
        telemetry.SpanHandle, "fail", lambda self, reason: reasons.append(reason)
    )

    with pytest.raises(OSError):
        with telemetry.span("notes::save", component="storage", metadata={"n": 1}):
            raise OSError("disk full")

    assert reasons == ["disk full"]

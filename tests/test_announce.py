from __future__ import annotations

from typing import Any

import pytest

from pgn130316.announce import TemperatureAnnouncer, build_meta
from pgn130316.delta import Delta
from pgn130316.models.mapping import ResolvedMapping
from pgn130316.state.seen import SeenPathSet


class _Recorder:
    def __init__(self) -> None:
        self.messages: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, plugin_id: str, delta: dict[str, Any]) -> None:
        self.messages.append((plugin_id, delta))


def _mapping(**overrides: Any) -> ResolvedMapping:
    data: dict[str, Any] = {"source": 0, "instance": 2, "name": "Sea Temperature", "path": "environment.water.2"}
    data.update(overrides)
    return ResolvedMapping(**data)


def test_build_meta_with_name() -> None:
    assert build_meta(_mapping()) == {
        "description": "Temperature, Extended Range (Sea Temperature)",
        "instance": 2,
        "source": 0,
        "units": "K",
    }


def test_build_meta_without_name() -> None:
    meta = build_meta(_mapping(name=None, source=99, path="sensors.temperature.99.2"))

    assert meta["description"] == "Temperature, Extended Range"
    assert meta["source"] == 99


def test_metadata_announced_once_per_leaf() -> None:
    recorder = _Recorder()
    seen = SeenPathSet()
    announcer = TemperatureAnnouncer(seen, Delta(recorder, "pgn130316"))

    first = announcer.announce(_mapping(), "temperature")
    second = announcer.announce(_mapping(), "temperature")

    assert first == second == "environment.water.2.temperature"
    assert len(recorder.messages) == 1
    plugin_id, delta = recorder.messages[0]
    assert plugin_id == "pgn130316"
    assert delta == {
        "updates": [
            {
                "meta": [
                    {
                        "path": "environment.water.2.temperature",
                        "value": {
                            "description": "Temperature, Extended Range (Sea Temperature)",
                            "instance": 2,
                            "source": 0,
                            "units": "K",
                        },
                    }
                ]
            }
        ]
    }
    assert "environment.water.2.temperature" in seen


def test_each_channel_gets_its_own_metadata() -> None:
    recorder = _Recorder()
    announcer = TemperatureAnnouncer(SeenPathSet(), Delta(recorder, "pgn130316"))

    announcer.announce(_mapping(), "temperature")
    announcer.announce(_mapping(), "setTemperature")

    paths = [delta["updates"][0]["meta"][0]["path"] for _, delta in recorder.messages]
    assert paths == ["environment.water.2.temperature", "environment.water.2.setTemperature"]


def test_seen_path_set_grows_monotonically() -> None:
    seen = SeenPathSet()

    assert seen.add("b.temperature") is True
    assert seen.add("a.temperature") is True
    assert seen.add("b.temperature") is False
    assert len(seen) == 2
    assert list(seen) == ["a.temperature", "b.temperature"]


def test_delta_commit_and_clear() -> None:
    recorder = _Recorder()
    delta = Delta(recorder, "pgn130316")

    delta.commit()
    assert recorder.messages == []

    delta.add_value("environment.water.0.temperature", 288.0)
    delta.add_meta("environment.water.0.temperature", {"units": "K"})
    assert delta.pending == 2
    delta.commit().clear()

    assert delta.pending == 0
    assert recorder.messages[0][1] == {
        "updates": [
            {
                "values": [{"path": "environment.water.0.temperature", "value": 288.0}],
                "meta": [{"path": "environment.water.0.temperature", "value": {"units": "K"}}],
            }
        ]
    }


def test_delta_keeps_none_value() -> None:
    recorder = _Recorder()

    Delta(recorder, "pgn130316").add_value("a.setTemperature", None).commit()

    assert recorder.messages[0][1] == {"updates": [{"values": [{"path": "a.setTemperature", "value": None}]}]}


def test_failed_commit_does_not_leak_into_next_delta() -> None:
    sent: list[dict[str, Any]] = []
    failures = [RuntimeError("host unavailable")]

    def handle_message(plugin_id: str, delta: dict[str, Any]) -> None:
        if failures:
            raise failures.pop()
        sent.append(delta)

    delta = Delta(handle_message, "pgn130316")

    with pytest.raises(RuntimeError):
        delta.add_meta("a.temperature", {"units": "K"}).commit()
    assert delta.pending == 0

    delta.add_value("b.temperature", 1.0).commit()

    assert sent == [{"updates": [{"values": [{"path": "b.temperature", "value": 1.0}]}]}]


def test_failed_announce_is_retried_on_next_message() -> None:
    sent: list[dict[str, Any]] = []
    failures = [RuntimeError("host unavailable")]

    def handle_message(plugin_id: str, delta: dict[str, Any]) -> None:
        if failures:
            raise failures.pop()
        sent.append(delta)

    seen = SeenPathSet()
    announcer = TemperatureAnnouncer(seen, Delta(handle_message, "pgn130316"))

    with pytest.raises(RuntimeError):
        announcer.announce(_mapping(), "temperature")
    assert "environment.water.2.temperature" not in seen

    announcer.announce(_mapping(), "temperature")

    assert [d["updates"][0]["meta"][0]["path"] for d in sent] == ["environment.water.2.temperature"]

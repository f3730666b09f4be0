"""Tests for the Board wiring: persistence, events and scheduling."""

import asyncio
import json

from wheelspin.app import Board
from wheelspin.config import Settings, StorageSettings
from wheelspin.core.events import EventType, add_item_request, remove_item_request, spin_request
from wheelspin.wheel import SPIN_DURATION_MS


def _saved(settings):
    return json.loads(settings.storage.state_file.read_text(encoding="utf-8"))


def test_board_defaults(settings, clock):
    board = Board(settings, clock=clock)
    assert list(board.stores) == ["styles", "games"]
    assert board.stores["styles"].placeholder == "Add style"
    assert all(len(store.items) == 5 for store in board.stores.values())
    assert len(board.scoreboard.slots) == 4


def test_item_change_saves_state(settings, clock):
    board = Board(settings, clock=clock)
    board.event_bus.emit(add_item_request("styles", "Disco"))

    data = _saved(settings)
    assert [i["text"] for i in data["wheels"]["styles"]][-1] == "Disco"
    assert len(data["wheels"]["games"]) == 5
    assert len(data["scores"]) == 4


def test_state_survives_restart(settings, clock):
    board = Board(settings, clock=clock)
    board.event_bus.emit(remove_item_request("games", 0))
    board.scoreboard.increment(3)
    items = board.stores["games"].items

    restored = Board(settings, clock=clock)
    assert restored.stores["games"].items == items
    assert restored.scoreboard.score(3) == 1


def test_score_change_emits_and_saves(settings, clock):
    board = Board(settings, clock=clock)
    board.scoreboard.select_team(0, "Red")
    events = board.event_bus.get_history(EventType.SCORE_CHANGED)
    assert len(events) == 1
    assert _saved(settings)["scores"][0] == {"team": "Red", "score": "0"}


def test_bad_saved_wheel_falls_back_to_defaults(settings, clock):
    settings.storage.state_file.write_text(json.dumps({
        "scores": [],
        "wheels": {"styles": [{"text": "x", "color": "not-a-color"}]},
    }), encoding="utf-8")
    board = Board(settings, clock=clock)
    assert [i.text for i in board.stores["styles"].items][0] == "Option 1"


def test_spin_driven_by_update(settings, clock):
    board = Board(settings, clock=clock)
    board.event_bus.emit(spin_request("games"))
    assert board.spinners["games"].is_spinning
    assert not board.spinners["styles"].is_spinning

    board.update(SPIN_DURATION_MS / 2, 1)
    assert board.stores["games"].wheel.spinning

    board.update(SPIN_DURATION_MS, 2)
    complete = board.event_bus.get_history(EventType.SPIN_COMPLETE)
    assert len(complete) == 1
    assert board.stores["games"].wheel.result == complete[0].data["result"]


def test_timer_driven_by_update(settings, clock):
    board = Board(settings, clock=clock)
    board.timer.set_time(0, 2)
    board.timer.start(0)
    board.update(1000)
    assert board.timer.display() == "0:01"
    board.update(2000)
    assert board.event_bus.get_history(EventType.TIMER_FINISHED)


def test_same_seed_same_outcome(settings, clock):
    results = []
    for _ in range(2):
        settings.storage.state_file.unlink(missing_ok=True)
        board = Board(settings, clock=clock)
        board.spinners["styles"].request_spin(0)
        board.update(SPIN_DURATION_MS)
        results.append(board.stores["styles"].wheel.result)
    assert results[0] == results[1]


def test_storage_disabled(tmp_path, clock):
    settings = Settings(
        _env_file=None,
        storage=StorageSettings(state_file=tmp_path / "state.json", enabled=False),
    )
    board = Board(settings, clock=clock)
    board.stores["styles"].add_item("Nope")
    assert board.state_store is None
    assert not (tmp_path / "state.json").exists()


def test_queued_requests_apply_when_queue_drains(settings, clock):
    board = Board(settings, clock=clock)
    board.event_bus.queue_event(add_item_request("styles", "Salsa"))
    board.event_bus.queue_event(remove_item_request("styles", 0))
    assert len(board.stores["styles"].items) == 5

    asyncio.run(board.event_bus.process_queue())
    texts = [item.text for item in board.stores["styles"].items]
    assert texts[0] == "Option 2"
    assert texts[-1] == "Salsa"
    assert len(texts) == 5

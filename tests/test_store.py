"""Tests for item add/edit/remove and change notification."""

from dataclasses import replace

from wheelspin.core.events import (
    EventType,
    add_item_request,
    edit_item_request,
    remove_item_request,
)
from wheelspin.wheel import WheelStore, add_item, create_wheel, remove_item

DEFAULT_TEXTS = ["Option 1", "Option 2", "Option 3", "Option 4", "Option 5"]


def _texts(store):
    return [item.text for item in store.items]


def test_default_items(store):
    assert _texts(store) == DEFAULT_TEXTS
    assert len({item.color for item in store.items}) == 5


def test_add_blank_is_noop(store):
    calls = []
    store.set_change_callback(lambda: calls.append(1))
    assert store.add_item("   ") is False
    assert store.add_item("") is False
    assert calls == []
    assert len(store.items) == 5


def test_add_item_gets_fresh_color(store):
    calls = []
    store.set_change_callback(lambda: calls.append(1))
    assert store.add_item("  Pizza ") is True
    assert len(store.items) == 6
    assert store.items[-1].text == "Pizza"
    assert store.items[-1].color not in {item.color for item in store.items[:-1]}
    assert calls == [1]


def test_many_adds_never_reuse_color_early(store):
    for i in range(10):
        store.add_item(f"Item {i}")
    colors = [item.color for item in store.items]
    assert len(set(colors)) == len(colors)


def test_second_palette_cycle_does_not_repeat_early(store):
    sequences = []
    assigned = []
    for i in range(30):
        store.add_item(f"Item {i}")
        palette = store.wheel.palette
        if not sequences or palette.colors != sequences[-1]:
            sequences.append(palette.colors)
        assigned.append(store.items[-1].color)

    # one initial sequence plus exactly one regeneration
    assert len(sequences) == 2
    first_cycle, second_cycle = assigned[:15], assigned[15:]
    assert len(set(first_cycle)) == 15
    assert len(set(second_cycle)) == 15
    assert store.wheel.palette.cursor == 15


def test_remove_item(store):
    former_fourth = store.items[3]
    assert store.remove_item(2) is True
    assert _texts(store) == ["Option 1", "Option 2", "Option 4", "Option 5"]
    assert store.items[2] == former_fourth


def test_edit_and_remove_notify_once_and_render_once(store):
    calls = []
    rendered = []
    store.set_change_callback(lambda: calls.append(1))
    store.set_render_callback(rendered.append)

    store.edit_item(1, "Salsa")
    assert calls == [1]
    assert len(rendered) == 1
    assert rendered[0] is store.wheel

    store.remove_item(0)
    assert calls == [1, 1]
    assert len(rendered) == 2
    assert rendered[1] is store.wheel


def test_out_of_range_ignored(store):
    calls = []
    store.set_change_callback(lambda: calls.append(1))
    assert store.remove_item(10) is False
    assert store.remove_item(-1) is False
    assert store.edit_item(5, "x") is False
    assert calls == []


def test_edit_keeps_color(store):
    color = store.items[0].color
    assert store.edit_item(0, "Tacos") is True
    assert store.items[0].text == "Tacos"
    assert store.items[0].color == color


def test_add_and_remove_clear_result(store):
    store.update_wheel(replace(store.wheel, result="Option 1"))
    store.add_item("Sushi")
    assert store.wheel.result == ""

    store.update_wheel(replace(store.wheel, result="Option 2"))
    store.remove_item(0)
    assert store.wheel.result == ""


def test_mutations_rejected_while_spinning(store):
    store.update_wheel(replace(store.wheel, spinning=True))
    assert store.add_item("x") is False
    assert store.edit_item(0, "x") is False
    assert store.remove_item(0) is False
    assert _texts(store) == DEFAULT_TEXTS


def test_render_callback_gets_new_wheel(store):
    rendered = []
    store.set_render_callback(rendered.append)
    store.add_item("Burger")
    assert len(rendered) == 1
    assert rendered[0] is store.wheel


def test_pure_functions_return_same_object_on_noop(rng):
    wheel = create_wheel(rng=rng)
    assert add_item(wheel, "", rng) is wheel
    assert remove_item(wheel, 99) is wheel


def test_event_bus_requests_are_routed_by_name(rng, event_bus):
    styles = WheelStore(name="styles", event_bus=event_bus, rng=rng)
    games = WheelStore(name="games", event_bus=event_bus, rng=rng)

    event_bus.emit(add_item_request("games", "Charades"))
    assert len(games.items) == 6
    assert len(styles.items) == 5

    event_bus.emit(edit_item_request("styles", 0, "Jazz"))
    assert styles.items[0].text == "Jazz"

    event_bus.emit(remove_item_request("games", 0))
    assert games.items[0].text == "Option 2"

    changes = event_bus.get_history(EventType.ITEMS_CHANGED)
    assert [e.source for e in changes] == ["games", "styles", "games"]
    assert len(changes[0].data["items"]) == 6


def test_detach_stops_routing(rng, event_bus):
    store = WheelStore(name="styles", event_bus=event_bus, rng=rng)
    store.detach()
    event_bus.emit(add_item_request("styles", "Polka"))
    assert len(store.items) == 5


def test_initial_items_from_dicts(rng):
    store = WheelStore(initial_items=[{"text": "A", "color": "#FFD23F"}], rng=rng)
    assert store.items[0].text == "A"
    assert store.items[0].color != "#ffd23f"  # darkened for white text

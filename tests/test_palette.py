"""Tests for palette generation and color assignment."""

import random

from wheelspin.palette import (
    EXTENDED_COLORS,
    PaletteState,
    generate_palette,
    new_palette_state,
    next_color,
    relative_luminance,
    shuffled,
)


def test_shuffled_is_permutation(rng):
    result = shuffled(EXTENDED_COLORS, rng)
    assert sorted(result) == sorted(EXTENDED_COLORS)


def test_shuffled_reproducible():
    a = shuffled(EXTENDED_COLORS, random.Random(7))
    b = shuffled(EXTENDED_COLORS, random.Random(7))
    assert a == b


def test_generate_palette_is_contrast_safe(rng):
    palette = generate_palette(EXTENDED_COLORS, rng)
    assert len(palette) == len(EXTENDED_COLORS)
    assert all(relative_luminance(c) <= 0.25 for c in palette)


def test_next_color_advances_cursor():
    state = PaletteState(colors=("#111111", "#222222"), source=("#111111", "#222222"))
    color, state = next_color(state)
    assert color == "#111111"
    assert state.cursor == 1
    assert "#111111" in state.used


def test_next_color_skips_used():
    state = PaletteState(
        colors=("#111111", "#222222", "#333333"),
        used=frozenset({"#111111", "#222222"}),
    )
    color, state = next_color(state)
    assert color == "#333333"
    assert state.cursor == 3
    assert state.exhausted


def test_next_color_regenerates_when_exhausted():
    source = ("#123456", "#234567")
    state = PaletteState(colors=("#111111",), cursor=1, source=source)
    color, state = next_color(state, random.Random(3))
    assert color in source
    assert state.cursor == 1
    assert sorted(state.colors) == sorted(source)


def test_regeneration_starts_a_fresh_used_set():
    source = ("#123456", "#234567", "#345678")
    state = PaletteState(colors=source, cursor=3, used=frozenset(source), source=source)
    rng = random.Random(5)

    first, state = next_color(state, rng)
    assert state.used == frozenset({first})

    rest = []
    for _ in range(2):
        color, state = next_color(state, rng)
        rest.append(color)
    assert sorted([first] + rest) == sorted(source)


def test_new_palette_state_normalizes_used(rng):
    state = new_palette_state(rng, used=["#ABC"])
    assert state.used == frozenset({"#aabbcc"})
    assert state.cursor == 0

"""Tests for the scoreboard and countdown timer."""

from wheelspin.widgets import CountdownTimer, Scoreboard, TeamScore, parse_score


def test_parse_score():
    assert parse_score("12") == 12
    assert parse_score("1a2") == 12
    assert parse_score("") == 0
    assert parse_score(None) == 0
    assert parse_score(7) == 7


def test_scoreboard_pads_to_four_slots():
    board = Scoreboard([TeamScore("Red", 3)])
    assert len(board.slots) == 4
    assert board.score(0) == 3
    assert board.slots[1] == TeamScore()


def test_scoreboard_increment_decrement():
    changes = []
    board = Scoreboard(on_change=lambda: changes.append(1))
    board.increment(2)
    board.increment(2)
    board.decrement(2)
    assert board.score(2) == 1
    assert len(changes) == 3


def test_scoreboard_never_negative():
    changes = []
    board = Scoreboard(on_change=lambda: changes.append(1))
    board.decrement(0)
    assert board.score(0) == 0
    assert changes == []


def test_scoreboard_typed_score_and_team():
    board = Scoreboard()
    board.set_score_text(1, "4x2")
    board.select_team(1, "Blue")
    assert board.to_list()[1] == {"team": "Blue", "score": "42"}


def test_team_score_from_dict():
    assert TeamScore.from_dict({"team": "Green", "score": "5"}) == TeamScore("Green", 5)
    assert TeamScore.from_dict({}) == TeamScore()


def test_countdown_display_and_tick():
    timer = CountdownTimer(1, 0)
    assert timer.display() == "1:00"
    assert timer.tick()
    assert timer.display() == "0:59"


def test_countdown_update_finishes_once():
    finished = []
    timer = CountdownTimer(1, 0, on_finished=lambda: finished.append(1))
    timer.start(0)

    timer.update(999)
    assert timer.display() == "1:00"
    timer.update(1000)
    assert timer.display() == "0:59"

    timer.update(61_000)
    assert timer.is_zero
    assert not timer.running
    assert finished == [1]


def test_countdown_tick_at_zero_stops():
    timer = CountdownTimer()
    timer.running = True
    assert timer.tick() is False
    assert not timer.running


def test_countdown_stop_and_reset():
    timer = CountdownTimer(2, 30)
    timer.start(0)
    timer.stop()
    timer.update(5000)
    assert timer.display() == "2:30"
    timer.reset()
    assert timer.is_zero


def test_countdown_clamps_input():
    timer = CountdownTimer(-1, 75)
    assert (timer.minutes, timer.seconds) == (0, 59)

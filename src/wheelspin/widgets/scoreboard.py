"""Team scoreboard shown next to the wheels."""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Optional
import logging
import re

logger = logging.getLogger(__name__)

TEAM_COUNT = 4

_NON_DIGITS = re.compile(r"[^0-9]")


@dataclass
class TeamScore:
    """One team slot: selected team name and its score."""
    team: str = ""
    score: int = 0

    def to_dict(self) -> dict:
        return {"team": self.team, "score": str(self.score)}

    @classmethod
    def from_dict(cls, data: Mapping) -> "TeamScore":
        return cls(team=str(data.get("team") or ""), score=parse_score(data.get("score")))


def parse_score(value) -> int:
    """Parse user input as a score, dropping anything but digits."""
    digits = _NON_DIGITS.sub("", str(value if value is not None else ""))
    return int(digits) if digits else 0


class Scoreboard:
    """
    Four team counters.

    Scores never go below zero. Every change calls on_change so the state
    store can save.
    """

    def __init__(
        self,
        scores: Optional[Iterable[TeamScore]] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        slots = list(scores or [])[:TEAM_COUNT]
        slots += [TeamScore() for _ in range(TEAM_COUNT - len(slots))]
        self._slots: List[TeamScore] = slots
        self._on_change = on_change

    @property
    def slots(self) -> List[TeamScore]:
        return list(self._slots)

    def set_change_callback(self, callback: Optional[Callable[[], None]]) -> None:
        self._on_change = callback

    def score(self, slot: int) -> int:
        return self._slots[slot].score

    def increment(self, slot: int) -> None:
        self._slots[slot].score += 1
        self._changed(slot)

    def decrement(self, slot: int) -> None:
        """Subtract one point; a zero score is left alone."""
        if self._slots[slot].score > 0:
            self._slots[slot].score -= 1
            self._changed(slot)

    def set_score_text(self, slot: int, text: str) -> None:
        """Set a score from typed input (non-digits are dropped)."""
        self._slots[slot].score = parse_score(text)
        self._changed(slot)

    def select_team(self, slot: int, team: str) -> None:
        self._slots[slot].team = team
        self._changed(slot)

    def to_list(self) -> List[dict]:
        return [slot.to_dict() for slot in self._slots]

    def _changed(self, slot: int) -> None:
        entry = self._slots[slot]
        logger.debug(f"Score slot {slot + 1}: {entry.team or '-'} = {entry.score}")
        if self._on_change is not None:
            self._on_change()

"""JSON file persistence for wheels and scores.

Layout of the state file::

    {
      "scores": [{"team": "...", "score": "3"}, ...],
      "wheels": {"styles": [{"text": "...", "color": "#rrggbb"}, ...], ...}
    }

A missing, unreadable or corrupt file means "no saved state": the error is
logged and callers fall back to defaults.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
import json
import logging

logger = logging.getLogger(__name__)


@dataclass
class SavedState:
    """Everything that survives a restart."""
    scores: List[dict] = field(default_factory=list)
    wheels: Dict[str, List[dict]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"scores": self.scores, "wheels": self.wheels}

    @classmethod
    def from_dict(cls, data: dict) -> "SavedState":
        scores = data.get("scores") or []
        wheels = data.get("wheels") or {}
        if not isinstance(scores, list) or not isinstance(wheels, dict):
            raise ValueError("Malformed state document")
        return cls(
            scores=[s for s in scores if isinstance(s, dict)],
            wheels={
                str(name): [i for i in items if isinstance(i, dict)]
                for name, items in wheels.items()
                if isinstance(items, list)
            },
        )


class StateStore:
    """Loads and saves SavedState as a single JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Optional[SavedState]:
        """Read the saved state, or None if there is none usable."""
        if not self.path.exists():
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                state = SavedState.from_dict(json.load(f))
            logger.info(f"Loaded state from {self.path} ({len(state.wheels)} wheels)")
            return state
        except Exception as e:
            logger.error(f"Failed to load state from {self.path}: {e}")
            return None

    def save(self, state: SavedState) -> bool:
        """Write the state file. Returns False (and logs) on failure."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(state.to_dict(), f, indent=2, ensure_ascii=False)
            logger.debug(f"State saved to {self.path}")
            return True
        except Exception as e:
            logger.error(f"Failed to save state to {self.path}: {e}")
            return False

"""Widgets that sit beside the wheels."""

from wheelspin.widgets.countdown import CountdownTimer
from wheelspin.widgets.scoreboard import Scoreboard, TeamScore, parse_score

__all__ = ["CountdownTimer", "Scoreboard", "TeamScore", "parse_score"]

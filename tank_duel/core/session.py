"""Match bookkeeping decoupled from rendering concerns."""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Tuple

from tank_duel.core.arena import ArenaSettings
from tank_duel.core.controls import Controls, InputState
from tank_duel.core.game import Game, monotonic_ms


class GameSession:
    """Own a Game and the status it reports: hearts, banner and round tally."""

    def __init__(
        self,
        settings: Optional[ArenaSettings] = None,
        *,
        controls: Optional[List[Controls]] = None,
        player_names: Tuple[str, str] = ("Player 1", "Player 2"),
        clock: Callable[[], float] = monotonic_ms,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.player_names = player_names
        self.hearts: Tuple[int, int] = (0, 0)
        self.banner_visible = False
        self.winner_id: Optional[int] = None
        self.message = ""
        self.match_scores = [0, 0]
        self.rounds_played = 0
        self.game = Game(
            settings,
            controls=controls,
            status=self,
            clock=clock,
            rng=rng,
        )

    # ------------------------------------------------------------------
    # Status listener
    def refresh_hearts(self, hp_one: int, hp_two: int) -> None:
        self.hearts = (max(0, hp_one), max(0, hp_two))

    def announce_winner(self, winner_id: int) -> None:
        self.winner_id = winner_id
        self.banner_visible = True
        self.match_scores[winner_id - 1] += 1
        self.rounds_played += 1
        self.message = f"{self.player_names[winner_id - 1]} Wins!"

    def hide_banner(self) -> None:
        self.banner_visible = False
        self.winner_id = None
        self.message = ""

    # ------------------------------------------------------------------
    # Host actions
    @property
    def active(self) -> bool:
        return self.game.game_active

    def step(self, keys: InputState, now: Optional[float] = None) -> bool:
        return self.game.step(keys, now)

    def restart(self) -> None:
        self.game.reset()

    def score_line(self) -> str:
        return (
            f"{self.player_names[0]} {self.match_scores[0]} - "
            f"{self.match_scores[1]} {self.player_names[1]}"
        )


__all__ = ["GameSession"]

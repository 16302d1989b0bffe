import math

from tank_duel.core.controls import InputState
from tank_duel.core.projectile import Projectile
from tank_duel.core.session import GameSession


def _finish_round(session: GameSession, loser_id: int) -> None:
    game = session.game
    loser = game.tank(loser_id)
    loser.hp = 1
    shooter = game.opponent_of(loser)
    heading = 0.0 if shooter.x < loser.x else math.pi
    offset = -30.0 if heading == 0.0 else 30.0
    shooter.projectiles.append(
        Projectile(x=loser.x + offset, y=loser.y, heading=heading, owner=shooter.id)
    )
    session.step(InputState())


def test_session_tracks_hearts_and_banner(session: GameSession):
    assert session.hearts == (3, 3)
    assert not session.banner_visible
    assert session.active

    _finish_round(session, loser_id=2)

    assert session.hearts == (3, 0)
    assert session.banner_visible
    assert session.winner_id == 1
    assert session.message == "Player 1 Wins!"
    assert not session.active


def test_restart_hides_banner_and_keeps_tally(session: GameSession):
    _finish_round(session, loser_id=2)
    session.restart()

    assert not session.banner_visible
    assert session.winner_id is None
    assert session.hearts == (3, 3)
    assert session.active

    _finish_round(session, loser_id=1)

    assert session.match_scores == [1, 1]
    assert session.rounds_played == 2
    assert session.score_line() == "Player 1 1 - 1 Player 2"

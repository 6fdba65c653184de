import pytest

from courtscore.scoring import badminton
from courtscore.scoring.badminton import Winner

pytestmark = pytest.mark.no_db


@pytest.mark.parametrize(
    "score1, score2",
    [
        (0, 0),
        (15, 15),
        (20, 20),
        (20, 5),
        (21, 0),
        (21, 19),
        (19, 21),
        (22, 20),
        (25, 23),
        (29, 27),
        (30, 28),
        (30, 29),
        (29, 30),
    ],
)
def test_accepts_legal_scores(score1, score2):
    assert badminton.is_valid_score(score1, score2) is True


@pytest.mark.parametrize(
    "score1, score2",
    [
        (-1, 5),
        (5, -1),
        (31, 0),
        (0, 31),
        (21, 20),
        (20, 21),
        (21, 21),
        (22, 21),
        (25, 21),
        (24, 20),
        (29, 29),
        (30, 27),
        (30, 30),
    ],
    ids=lambda v: str(v),
)
def test_rejects_illegal_scores(score1, score2):
    assert badminton.is_valid_score(score1, score2) is False


def test_deuce_game_must_finish_two_clear():
    # Every two-point lead from 22-20 through 29-27 is a finished deuce game.
    for hi in range(22, 30):
        assert badminton.is_valid_score(hi, hi - 2)
        assert not badminton.is_valid_score(hi, hi - 1)
        assert not badminton.is_valid_score(hi, hi - 3)


def test_determine_winner_is_plain_comparison():
    assert badminton.determine_winner(21, 19) is Winner.TEAM1
    assert badminton.determine_winner(19, 21) is Winner.TEAM2
    assert badminton.determine_winner(15, 15) is Winner.NONE


def test_determine_winner_ignores_validity():
    assert not badminton.is_valid_score(40, 3)
    assert badminton.determine_winner(40, 3) is Winner.TEAM1
    assert badminton.determine_winner(21, 20) is Winner.TEAM1
    assert badminton.determine_winner(29, 29) is Winner.NONE


def test_game_complete_only_for_terminal_scores():
    assert badminton.is_game_complete(21, 10)
    assert badminton.is_game_complete(30, 29)
    assert not badminton.is_game_complete(20, 18)
    assert not badminton.is_game_complete(21, 20)

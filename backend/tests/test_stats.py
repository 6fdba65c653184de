from dataclasses import dataclass

import pytest

from courtscore.services.stats import (
    Medal,
    compute_rankings,
    format_win_percentage,
    medal_class,
    medal_for_rank,
)

pytestmark = pytest.mark.no_db


@dataclass
class P:
    name: str
    wins: int
    matches: int


def test_empty_input_gives_empty_rankings():
    assert compute_rankings([]) == []


def test_ranks_by_win_percentage():
    players = [P("a", 8, 12), P("b", 15, 18), P("c", 12, 15)]
    stats = compute_rankings(players)

    assert [s.player.name for s in stats] == ["b", "c", "a"]
    assert [s.rank for s in stats] == [1, 2, 3]
    assert [round(s.win_percentage, 4) for s in stats] == [0.8333, 0.8, 0.6667]


def test_ties_broken_by_wins_then_input_order():
    players = [P("few", 5, 5), P("first", 10, 10), P("second", 10, 10)]
    stats = compute_rankings(players)

    assert [s.player.name for s in stats] == ["first", "second", "few"]
    assert [s.rank for s in stats] == [1, 2, 3]


def test_no_matches_means_zero_percentage():
    stats = compute_rankings([P("new", 0, 0), P("loser", 0, 4)])

    assert all(s.win_percentage == 0 for s in stats)
    # Both at 0% with 0 wins: input order decides.
    assert [s.player.name for s in stats] == ["new", "loser"]


def test_ranks_are_dense_and_complete():
    players = [P(str(i), i % 3, 3) for i in range(10)]
    stats = compute_rankings(players)

    assert len(stats) == len(players)
    assert [s.rank for s in stats] == list(range(1, 11))


def test_duplicates_are_kept():
    p = P("dup", 1, 2)
    assert len(compute_rankings([p, p])) == 2


def test_input_is_not_mutated():
    players = [P("a", 1, 4), P("b", 3, 4)]
    compute_rankings(players)
    assert [p.name for p in players] == ["a", "b"]


@pytest.mark.parametrize(
    "wins, matches, expected",
    [
        (0, 0, "0.00000"),
        (5, 0, "0.00000"),
        (0, 3, "0.00000"),
        (1, 1, "100.00000"),
        (1, 3, "33.33333"),
        (2, 3, "66.66667"),
        (15, 18, "83.33333"),
        (1, 8, "12.50000"),
    ],
)
def test_format_win_percentage(wins, matches, expected):
    assert format_win_percentage(wins, matches) == expected


def test_medals():
    assert medal_for_rank(1) is Medal.GOLD
    assert medal_for_rank(2) is Medal.SILVER
    assert medal_for_rank(3) is Medal.BRONZE
    assert medal_for_rank(4) is Medal.NONE
    assert medal_for_rank(0) is Medal.NONE
    assert medal_class(1) == "medal-gold"
    assert medal_class(3) == "medal-bronze"
    assert medal_class(7) == ""

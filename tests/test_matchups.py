"""
Matchup generation.

Tier 1 is structural: 82 games, 41 home / 41 away, two 3-game opponents per
same-conference division pair. Tiers 2/3 are phased and must hit the target
count with per-pair home/away within one game.
"""

import logging
import random
from collections import Counter, defaultdict

import pytest

from divisions import Team, build_tier_teams
from divisions.config import CONFERENCE_BY_DIVISION
from matchups import (
    PairLedger,
    build_downgrade_permutations,
    count_mismatches,
    expand_pair,
    generate_matchups,
    pair_key,
    split_home_away,
    tally_games,
)
from matchups.phased import PhasedMatchupBuilder, two_hop_divisions


def _pair_counts(matchups):
    return Counter(m.opp_key for m in matchups)


def _home_counts(matchups):
    return Counter(m.home_team_id for m in matchups)


def _pair_home_diffs(matchups):
    homes = defaultdict(lambda: [0, 0])
    for m in matchups:
        key = m.opp_key
        homes[key][0 if m.home_team_id == key[0] else 1] += 1
    return {k: abs(a - b) for k, (a, b) in homes.items()}


class TestPairing:
    def test_split_even(self, rng):
        assert split_home_away(4, rng) == (2, 2)
        assert split_home_away(0, rng) == (0, 0)

    def test_split_odd_respects_favored_side(self, rng):
        assert split_home_away(3, rng, a_favored=True) == (2, 1)
        assert split_home_away(3, rng, a_favored=False) == (1, 2)
        assert sorted(split_home_away(3, rng)) == [1, 2]

    def test_expand_pair(self, rng):
        games = expand_pair("a", "b", 3, rng, favored="b")
        assert len(games) == 3
        assert _home_counts(games) == Counter({"b": 2, "a": 1})

    @pytest.mark.parametrize("n", [2, 3, 5, 8])
    def test_permutations_never_collide(self, n):
        for seed in range(25):
            p1, p2 = build_downgrade_permutations(n, random.Random(seed))
            assert sorted(p1) == list(range(n))
            assert sorted(p2) == list(range(n))
            assert all(p1[i] != p2[i] for i in range(n))

    def test_offset_fallback_when_search_budget_is_zero(self):
        p1, p2 = build_downgrade_permutations(5, random.Random(3), max_attempts=0)
        assert p2 == [p1[(i + 1) % 5] for i in range(5)]
        assert all(a != b for a, b in zip(p1, p2))

    def test_permutations_need_two_rows(self, rng):
        with pytest.raises(ValueError):
            build_downgrade_permutations(1, rng)

    def test_ledger_alternates_home_court(self, rng):
        ledger = PairLedger(rng)
        for _ in range(6):
            ledger.add_game("a", "b")
        assert ledger.home_games("a", "b") == ledger.home_games("b", "a") == 3
        assert ledger.games("b", "a") == 6
        ledger.remove_game(ledger.matchups[0])
        assert ledger.games("a", "b") == 5
        assert ledger.team_games("a") == ledger.team_games("b") == 5


class TestStructured:
    @pytest.fixture(name="matchups")
    def matchups_fixture(self, tier1_teams):
        return generate_matchups(tier1_teams, tier=1, num_games=82, rng=random.Random(7))

    def test_total_and_per_team_counts(self, tier1_teams, matchups):
        assert len(matchups) == 1230
        counts = tally_games(matchups)
        assert set(counts.values()) == {82}
        assert count_mismatches(tier1_teams, matchups, 82) == {}

    def test_every_team_is_41_and_41(self, matchups):
        assert set(_home_counts(matchups).values()) == {41}

    def test_pair_game_counts_follow_structure(self, tier1_teams, matchups):
        by_id = {t.team_id: t for t in tier1_teams}
        pairs = _pair_counts(matchups)
        for (a, b), n in pairs.items():
            ta, tb = by_id[a], by_id[b]
            if ta.division == tb.division:
                assert n == 4
            elif ta.conference != tb.conference:
                assert n == 2
            else:
                assert n in (3, 4)

    def test_three_game_slate_per_division_pair(self, tier1_teams, matchups):
        pairs = _pair_counts(matchups)
        by_div = defaultdict(list)
        for t in tier1_teams:
            by_div[t.division].append(t.team_id)

        divs = list(by_div)
        for i, da in enumerate(divs):
            for db in divs[i + 1:]:
                if CONFERENCE_BY_DIVISION[da] != CONFERENCE_BY_DIVISION[db]:
                    continue
                for side, other in ((by_div[da], by_div[db]), (by_div[db], by_div[da])):
                    for tid in side:
                        slate = Counter(pairs[pair_key(tid, o)] for o in other)
                        assert slate == Counter({4: 3, 3: 2})

    def test_pair_home_split_within_one(self, matchups):
        assert max(_pair_home_diffs(matchups).values()) <= 1

    def test_same_seed_same_matchups(self, tier1_teams):
        a = generate_matchups(tier1_teams, tier=1, rng=random.Random(11))
        b = generate_matchups(tier1_teams, tier=1, rng=random.Random(11))
        assert a == b

    def test_uneven_division_pair_is_reported(self, tier1_teams, caplog):
        teams = [t.with_division("Atlantic") if t.name == "Chicago Bulls" else t for t in tier1_teams]
        with caplog.at_level(logging.WARNING):
            matchups = generate_matchups(teams, tier=1, rng=random.Random(1))
        assert count_mismatches(teams, matchups, 82)
        assert "STRUCTURED_UNEVEN_DIVISION_PAIR" in caplog.text
        assert "MATCHUP_COUNT_MISMATCH" in caplog.text


class TestPhased:
    def test_two_divisions_of_six_neighbor_fill(self, make_teams):
        divs = ["Greater Los Angeles MBL", "Bay Area MBL"]
        teams = make_teams(3, divs, 6)
        division_of = {t.team_id: t.division for t in teams}

        matchups = generate_matchups(teams, tier=3, num_games=40, rng=random.Random(5))

        assert set(tally_games(matchups).values()) == {40}
        pairs = _pair_counts(matchups)
        cross = Counter()
        for (a, b), n in pairs.items():
            if division_of[a] == division_of[b]:
                assert n == 6
            else:
                cross[a] += n
                cross[b] += n
        assert set(cross.values()) == {10}
        assert max(_pair_home_diffs(matchups).values()) <= 1

    def test_large_division_reduces_intra_games(self, make_teams):
        teams = make_teams(3, ["Greater Los Angeles MBL"], 12)
        builder = PhasedMatchupBuilder(teams, tier=3, num_games=40, rng=random.Random(2))
        builder.intra_division()
        # 6 x 11 > 40, so phase 1 plays 40 // 11 = 3 per mate
        assert set(_pair_counts(builder.ledger.matchups).values()) == {3}

        matchups = generate_matchups(teams, tier=3, num_games=40, rng=random.Random(2))
        assert set(tally_games(matchups).values()) == {40}

    def test_lone_short_team_swaps_into_existing_games(self, make_teams, caplog):
        """An isolated team takes over X-Y games as T-X plus T-Y."""
        teams = make_teams(3, ["Greater Seattle MBL"], 3)
        teams.append(Team(team_id="9", name="Upstate New York MBL 0", tier=3, division="Upstate New York MBL"))

        with caplog.at_level(logging.WARNING, logger="matchups"):
            matchups = generate_matchups(teams, tier=3, num_games=4, rng=random.Random(4))

        assert tally_games(matchups) == {"0": 4, "1": 4, "2": 4, "9": 4}
        assert count_mismatches(teams, matchups, 4) == {}
        assert max(_pair_home_diffs(matchups).values()) <= 1
        opponents = {b if a == "9" else a for a, b in _pair_counts(matchups) if "9" in (a, b)}
        assert len(opponents) >= 2
        assert "MATCHUP_FALLBACK" in caplog.text
        assert "MATCHUP_COUNT_MISMATCH" not in caplog.text

    def test_two_hop_divisions(self):
        assert two_hop_divisions(2, "Pacific Northwest") == ["Southwest", "Great Plains"]
        assert two_hop_divisions(3, "Greater Seattle MBL") == ["Mountain West MBL"]

    def test_two_hop_phase_is_tier2_only(self, make_teams, caplog):
        t2 = make_teams(2, ["Pacific Northwest", "Southwest"], 8)
        with caplog.at_level(logging.WARNING, logger="matchups"):
            m2 = generate_matchups(t2, tier=2, num_games=60, rng=random.Random(9))
        assert set(tally_games(m2).values()) == {60}
        assert "MATCHUP_FALLBACK" not in caplog.text

        caplog.clear()
        t3 = make_teams(3, ["Greater Seattle MBL", "Mountain West MBL"], 6)
        with caplog.at_level(logging.WARNING, logger="matchups"):
            m3 = generate_matchups(t3, tier=3, num_games=40, rng=random.Random(9))
        assert set(tally_games(m3).values()) == {40}
        assert "MATCHUP_FALLBACK" in caplog.text

    @pytest.mark.parametrize("tier", [2, 3])
    def test_seed_tiers_hit_exact_counts(self, tier):
        teams = build_tier_teams(tier)
        matchups = generate_matchups(teams, tier=tier, rng=random.Random(tier))
        assert count_mismatches(teams, matchups, 60 if tier == 2 else 40) == {}
        assert max(_pair_home_diffs(matchups).values()) <= 1

    def test_single_team_cannot_be_filled(self, caplog):
        teams = build_tier_teams(3)[:1]
        with caplog.at_level(logging.WARNING):
            matchups = generate_matchups(teams, tier=3, num_games=40, rng=random.Random(0))
        assert matchups == []
        assert "MATCHUP_COUNT_MISMATCH" in caplog.text


def test_generate_matchups_rejects_bad_input(tier1_teams, rng):
    with pytest.raises(ValueError):
        generate_matchups(tier1_teams, tier=0, rng=rng)
    with pytest.raises(ValueError):
        generate_matchups(tier1_teams, tier=1, num_games=-1, rng=rng)
    assert generate_matchups([], tier=2, rng=rng) == []

"""
Unit tests for the period + checkpoint schedule builder.

Tests balancing, role partitioning, substitution constraints, determinism
and fail-fast validation.
"""
import unittest

from rotation_planner.models import DEFAULT_CONFIG, GoalieMode, RotationConfig
from rotation_planner.services import (
    InsufficientRosterError, InvalidConfigError, InvalidGoalieCountError, UnknownGoalieError,
    RotationService, build_rotation_schedule, generate_player_list
)


def goalie_sets(players):
    """The three goalie configurations exercised for every roster size."""
    return [players[:1], players[:2], players[:3]]


class TestFixedGoalieSchedule(unittest.TestCase):
    """Test plans where one goalie keeps goal all match."""

    def setUp(self) -> None:
        """Set up the eight player fixed-goalie plan."""
        self.players = generate_player_list(8)
        self.result = build_rotation_schedule(self.players, ["Player 1"], DEFAULT_CONFIG)

    def test_three_periods_same_goalie(self) -> None:
        self.assertEqual(len(self.result.schedule), 3)
        self.assertEqual([p.goalie for p in self.result.schedule], ["Player 1"] * 3)
        self.assertEqual(self.result.goalie_mode, GoalieMode.FIXED)

    def test_total_field_minutes(self) -> None:
        self.assertEqual(sum(self.result.field_minutes.values()), 360)

    def test_goalie_excluded_from_field_minutes(self) -> None:
        self.assertNotIn("Player 1", self.result.field_minutes)
        self.assertEqual(list(self.result.field_minutes), self.players[1:])
        self.assertEqual(self.result.goalie_minutes["Player 1"], 60)

    def test_minute_tables_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.result.field_minutes["Player 2"] = 0
        with self.assertRaises(TypeError):
            self.result.goalie_minutes["Player 1"] = 0
        self.assertEqual(self.result.to_dict()["field_minutes"], dict(self.result.field_minutes))

    def test_target(self) -> None:
        self.assertAlmostEqual(self.result.target_field_minutes, 360 / 7)

    def test_full_squad_without_bench_plays_every_minute(self) -> None:
        result = build_rotation_schedule(generate_player_list(7), ["Player 1"], DEFAULT_CONFIG)

        self.assertEqual(set(result.field_minutes.values()), {60})
        for period in result.schedule:
            self.assertEqual(period.bench_players, ())
            self.assertEqual(period.substitutions, ())

    def test_spread_within_half_a_period(self) -> None:
        for size in range(7, 11):
            with self.subTest(size=size):
                result = build_rotation_schedule(generate_player_list(size), ["Player 1"], DEFAULT_CONFIG)
                self.assertLessEqual(result.minutes_spread, DEFAULT_CONFIG.period_length / 2)


class TestRotatingGoalieSchedule(unittest.TestCase):
    """Test plans where two or three goalies take turns."""

    def setUp(self) -> None:
        """Set up the rotating scenario from the match-setup screen."""
        self.players = generate_player_list(8)
        self.goalies = ["Player 3", "Player 4", "Player 8"]
        self.service = RotationService(DEFAULT_CONFIG)
        self.result = self.service.plan_match(self.players, self.goalies)

    def test_goalies_cycle_per_period(self) -> None:
        self.assertEqual([p.goalie for p in self.result.schedule], self.goalies)
        self.assertEqual(self.result.goalie_mode, GoalieMode.ROTATING)

    def test_target_is_equal_share(self) -> None:
        self.assertEqual(round(self.result.target_field_minutes), 45)

    def test_everyone_accrues_field_minutes(self) -> None:
        self.assertEqual(list(self.result.field_minutes), self.players)
        self.assertEqual(sum(self.result.field_minutes.values()), 360)

    def test_minutes_close_to_target(self) -> None:
        target = self.result.target_field_minutes
        deltas = [abs(m - target) for m in self.result.field_minutes.values()]

        self.assertTrue(all(delta <= 10 for delta in deltas))
        self.assertGreaterEqual(sum(1 for delta in deltas if delta <= 5), 6)

    def test_each_player_holds_one_role_per_period(self) -> None:
        for period in self.result.schedule:
            roles = [period.goalie, *period.field_players, *period.bench_players]
            self.assertEqual(sorted(roles), sorted(self.players))
            self.assertEqual(len(period.field_players), 6)

    def test_three_goalie_spread_within_half_a_period(self) -> None:
        for size in range(8, 11):
            with self.subTest(size=size):
                players = generate_player_list(size)
                result = self.service.plan_match(players, players[:3])
                self.assertLessEqual(result.minutes_spread, DEFAULT_CONFIG.period_length / 2)

    def test_forced_sit_out_starts_on_bench(self) -> None:
        result = build_rotation_schedule(
            self.players, self.goalies, DEFAULT_CONFIG, bench_assignment={"Player 1": 2}
        )
        self.assertIn("Player 1", result.schedule[1].starting_bench_players)


class TestScheduleInvariants(unittest.TestCase):
    """Properties that hold for every roster size and goalie configuration."""

    def iter_results(self):
        service = RotationService(DEFAULT_CONFIG)
        for size in range(7, 11):
            players = generate_player_list(size)
            for goalies in goalie_sets(players):
                yield players, goalies, service.plan_match(players, goalies)

    def test_field_minutes_sum_to_supply(self) -> None:
        for players, goalies, result in self.iter_results():
            with self.subTest(size=len(players), goalies=len(goalies)):
                self.assertEqual(sum(result.field_minutes.values()), DEFAULT_CONFIG.total_field_minutes)

    def test_every_minute_partitions_the_roster(self) -> None:
        for players, goalies, result in self.iter_results():
            for period in result.schedule:
                for minute in range(DEFAULT_CONFIG.period_length):
                    field, bench = period.lineup_at(minute)
                    with self.subTest(size=len(players), period=period.index, minute=minute):
                        self.assertEqual(len(field), DEFAULT_CONFIG.field_players_on_pitch)
                        self.assertEqual(sorted([period.goalie, *field, *bench]), sorted(players))

    def test_field_minutes_match_the_lineups(self) -> None:
        for players, goalies, result in self.iter_results():
            counted = {name: 0 for name in result.field_minutes}
            for period in result.schedule:
                for minute in range(DEFAULT_CONFIG.period_length):
                    for name in period.lineup_at(minute)[0]:
                        counted[name] += 1
            with self.subTest(size=len(players), goalies=len(goalies)):
                self.assertEqual(counted, result.field_minutes)

    def test_substitutions_on_checkpoints_only(self) -> None:
        for players, goalies, result in self.iter_results():
            for period in result.schedule:
                with self.subTest(size=len(players), period=period.index):
                    self.assertLessEqual(len(period.substitutions), 2)
                    for sub in period.substitutions:
                        self.assertIn(sub.minute, (5, 10, 15))

    def test_final_lineup_matches_last_substitution(self) -> None:
        for players, goalies, result in self.iter_results():
            for period in result.schedule:
                field, bench = period.lineup_at(DEFAULT_CONFIG.period_length)
                self.assertEqual(sorted(field), sorted(period.field_players))
                self.assertEqual(sorted(bench), sorted(period.bench_players))

    def test_two_goalies_produce_substitutions(self) -> None:
        players = generate_player_list(8)
        result = build_rotation_schedule(players, ["Player 1", "Player 2"], DEFAULT_CONFIG)
        self.assertTrue(any(period.substitutions for period in result.schedule))


class TestScheduleDeterminism(unittest.TestCase):
    """Identical inputs always produce identical plans."""

    def test_repeat_calls_are_identical(self) -> None:
        players = generate_player_list(9)
        goalies = ["Player 2", "Player 5", "Player 9"]
        bench = RotationService().bench_assignment_for(players, goalies)

        first = build_rotation_schedule(players, goalies, DEFAULT_CONFIG, bench)
        second = build_rotation_schedule(players, goalies, DEFAULT_CONFIG, dict(bench))

        self.assertEqual(first, second)
        self.assertEqual(first.to_dict(), second.to_dict())

    def test_custom_period_length_scales_checkpoints(self) -> None:
        config = RotationConfig(num_periods=2, period_length=40, field_players_on_pitch=6)
        result = build_rotation_schedule(generate_player_list(9), ["Player 1"], config)

        self.assertEqual(config.checkpoints(), (10, 20, 30))
        self.assertEqual(sum(result.field_minutes.values()), 480)
        for period in result.schedule:
            for sub in period.substitutions:
                self.assertIn(sub.minute, (10, 20, 30))


class TestScheduleFailFast(unittest.TestCase):
    """Invalid input raises before any plan is produced."""

    def test_error_kinds(self) -> None:
        players = generate_player_list(8)
        cases = [
            (InvalidConfigError, players, ["Player 1"], RotationConfig(period_length=0)),
            (InvalidConfigError, players, ["Player 1"], RotationConfig(num_periods=-1)),
            (InsufficientRosterError, players[:5], ["Player 1"], DEFAULT_CONFIG),
            (UnknownGoalieError, players, ["Player 99"], DEFAULT_CONFIG),
            (InvalidGoalieCountError, players, [], DEFAULT_CONFIG),
            (InvalidGoalieCountError, players, players[:4], DEFAULT_CONFIG),
        ]
        for error, roster, goalies, config in cases:
            with self.subTest(error=error.__name__):
                with self.assertRaises(error):
                    build_rotation_schedule(roster, goalies, config)


if __name__ == '__main__':
    unittest.main()

"""
Rotation service for the Rotation Planner.

Wires the engine together the way a match-setup screen uses it:
roster + config -> bench allocation -> schedule -> report.
"""
import logging
from typing import Dict, Iterable, Mapping, Optional

from ..models import (
    DEFAULT_CONFIG, FairnessReport, GoalieMode, MinuteSchedule, RotationConfig, ScheduleResult
)
from ..utils import MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN
from .bench_allocator import assign_bench_periods
from .errors import InvalidConfigError
from .minute_schedule import generate_minute_schedule
from .roster_service import build_roster, validate_bench_assignment
from .schedule_builder import RotationScheduleBuilder
from .schedule_formatter import (
    ExportServiceInterface, ScheduleReportExporter, format_minute_schedule, format_schedule,
    summarize_fairness
)

logger = logging.getLogger(__name__)

STRATEGY_CHECKPOINT = "checkpoint"
STRATEGY_MINUTE = "minute"
STRATEGIES = (STRATEGY_CHECKPOINT, STRATEGY_MINUTE)


class RotationService:
    """
    Plans matches with a fixed configuration.

    The service is stateless between calls; every plan is computed from its
    arguments alone.
    """

    def __init__(self, config: RotationConfig = DEFAULT_CONFIG,
                 export_service: Optional[ExportServiceInterface] = None):
        """
        Initialize the rotation service.

        Args:
            config: Match configuration used for every plan
            export_service: Optional CSV exporter
        """
        self.config = config
        self.export_service = export_service or ScheduleReportExporter()

    def bench_assignment_for(self, players: Iterable[str], goalies: Iterable[str]) -> Dict[str, int]:
        """Forced sit-out periods for rotating goalies; empty for a fixed goalie."""
        roster = build_roster(players, goalies, self.config)
        if roster.goalie_mode is GoalieMode.FIXED:
            return {}
        return assign_bench_periods(
            roster.players,
            roster.goalies,
            roster.size,
            self.config.field_players_on_pitch,
            self.config.num_periods,
        )

    def plan_match(self, players: Iterable[str], goalies: Iterable[str],
                   bench_assignment: Optional[Mapping[str, int]] = None) -> ScheduleResult:
        """
        Plan a match with the period + checkpoint model.

        Args:
            players: Player names in roster order
            goalies: Eligible goalies
            bench_assignment: Optional override; computed automatically for
                rotating goalies when omitted

        Returns:
            Finished ScheduleResult
        """
        players = list(players)
        goalies = list(goalies)
        roster = build_roster(players, goalies, self.config)
        if bench_assignment is None:
            bench_assignment = self.bench_assignment_for(roster.players, roster.goalies)

        assignment = validate_bench_assignment(roster, self.config, bench_assignment)
        result = RotationScheduleBuilder(roster, self.config, assignment).build()
        logger.info("Planned %d periods for %d players (%s goalies), spread %d min",
                    len(result.schedule), roster.size, result.goalie_mode.value, result.minutes_spread)
        return result

    def plan_minute_by_minute(self, players: Iterable[str], goalies: Iterable[str],
                              initial_positions: Optional[Mapping[int, str]] = None,
                              fairness_threshold: int = MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN
                              ) -> MinuteSchedule:
        """Plan a match with the minute-by-minute model."""
        return generate_minute_schedule(
            players, goalies, self.config, initial_positions, fairness_threshold
        )

    def plan(self, players: Iterable[str], goalies: Iterable[str],
             strategy: str = STRATEGY_CHECKPOINT):
        """
        Plan a match with the named strategy.

        Raises:
            InvalidConfigError: If the strategy is unknown
        """
        if strategy == STRATEGY_CHECKPOINT:
            return self.plan_match(players, goalies)
        if strategy == STRATEGY_MINUTE:
            return self.plan_minute_by_minute(players, goalies)
        raise InvalidConfigError(
            f"Unknown strategy '{strategy}', expected one of: {', '.join(STRATEGIES)}"
        )

    def render(self, plan) -> str:
        """Printable report for either strategy's result."""
        if isinstance(plan, MinuteSchedule):
            return format_minute_schedule(plan)
        return format_schedule(plan)

    def fairness(self, result: ScheduleResult) -> FairnessReport:
        return summarize_fairness(result)

    def export_csv(self, result: ScheduleResult) -> str:
        return self.export_service.export_to_csv(result)

"""Text, fairness and CSV rendering of rotation plans."""

from __future__ import annotations

import csv
import io
import statistics
from collections import Counter
from typing import List, Optional, Protocol

from ..models import (
    FairnessReport, GoalieMode, MinuteSchedule, PlayerMinutesSummary, ScheduleResult,
    position_label
)
from ..utils import FAIRNESS_THRESHOLD_MIN, fmt_minute_mark, fmt_minutes

FAIRNESS_ORDER = {"under": 0, "ok": 1, "over": 2}


class ExportServiceInterface(Protocol):
    """Interface for minute table export."""

    def export_to_csv(self, result: ScheduleResult, report: Optional[FairnessReport] = None) -> str:
        """Export the minute table to CSV format."""
        ...


def _names(players) -> str:
    return ", ".join(players) if players else "(none)"


def format_schedule(result: ScheduleResult) -> str:
    """
    Render a plan as a printable report.

    Each period lists the kick-off lineup followed by its substitutions, then
    the accumulated field minutes per player are listed against the target.
    """
    lines = [
        "Rotation Schedule:",
        f"Goalie mode: {result.goalie_mode.value} | "
        f"Target field minutes per player: {fmt_minutes(result.target_field_minutes)}",
    ]
    for period in result.schedule:
        lines.append("")
        lines.append(f"Period {period.index}:")
        lines.append(f"  Goalie: {period.goalie}")
        lines.append(f"  Field Players: {_names(period.starting_field_players)}")
        lines.append(f"  Bench: {_names(period.starting_bench_players)}")
        if period.substitutions:
            lines.append("  Substitutions:")
            for sub in period.substitutions:
                lines.append(
                    f"    {fmt_minute_mark(sub.minute)}  In: {sub.player_in}  Out: {sub.player_out}"
                )

    lines.append("")
    lines.append("Accumulated Field Minutes per Player:")
    width = max((len(name) for name in [*result.field_minutes, *result.goalie_minutes]), default=0)
    for name, minutes in result.field_minutes.items():
        delta = minutes - result.target_field_minutes
        lines.append(f"  {name.ljust(width)}  {minutes:>3} min ({delta:+.1f})")
    if result.goalie_minutes:
        keepers = [(name, mins) for name, mins in result.goalie_minutes.items() if mins]
        lines.append("")
        lines.append("Goalie Minutes:")
        for name, minutes in keepers:
            lines.append(f"  {name.ljust(width)}  {minutes:>3} min")
    return "\n".join(lines) + "\n"


def format_minute_schedule(schedule: MinuteSchedule) -> str:
    """Render the minute-by-minute variant: one line per minute, then the summary."""
    lines = ["Minute-by-Minute Schedule:"]
    for record in schedule.records:
        field = ", ".join(
            f"{position_label(pos)}={name}" for pos, name in sorted(record.field.items())
        )
        lines.append(
            f"Minute {record.minute}: Goalie: {record.goalie} | Field: {field} | "
            f"Bench: {_names(record.bench)}"
        )
    lines.append("")
    lines.append("Player Summary:")
    for stats in schedule.summary.values():
        lines.append(
            f"  {stats.name} - Total: {stats.total_minutes} min, Goalie: {stats.goalie_minutes} min, "
            f"Bench: {stats.bench_minutes} min"
        )
    return "\n".join(lines) + "\n"


def classify_fairness(delta_minutes: float, threshold: float = FAIRNESS_THRESHOLD_MIN) -> str:
    if delta_minutes < -threshold:
        return "under"
    if delta_minutes > threshold:
        return "over"
    return "ok"


def summarize_fairness(result: ScheduleResult,
                       threshold: float = FAIRNESS_THRESHOLD_MIN) -> FairnessReport:
    """
    Compare every field-pool player with the target.

    Players further than ``threshold`` minutes from the target are flagged
    ``under`` or ``over``. Summaries are sorted with the most short-changed first.
    """
    periods_in_goal = Counter(period.goalie for period in result.schedule)
    summaries: List[PlayerMinutesSummary] = []
    for name, minutes in result.field_minutes.items():
        delta = minutes - result.target_field_minutes
        summaries.append(
            PlayerMinutesSummary(
                name=name,
                field_minutes=minutes,
                goalie_minutes=result.goalie_minutes.get(name, 0),
                target_minutes=result.target_field_minutes,
                delta_minutes=round(delta, 2),
                periods_in_goal=periods_in_goal.get(name, 0),
                fairness=classify_fairness(delta, threshold),
            )
        )
    summaries.sort(key=lambda item: (FAIRNESS_ORDER[item.fairness], item.delta_minutes, item.name))

    totals = list(result.field_minutes.values())
    fairness_counter = Counter(summary.fairness for summary in summaries)
    return FairnessReport(
        goalie_mode=result.goalie_mode.value,
        target_minutes=result.target_field_minutes,
        total_field_minutes=result.total_field_minutes,
        players=summaries,
        average_minutes=statistics.mean(totals) if totals else 0.0,
        median_minutes=statistics.median(totals) if totals else 0.0,
        min_minutes=min(totals) if totals else 0,
        max_minutes=max(totals) if totals else 0,
        spread_minutes=result.minutes_spread,
        fairness_counts={label: fairness_counter.get(label, 0) for label in FAIRNESS_ORDER},
    )


class ScheduleReportExporter:
    """CSV export of the accumulated minute table."""

    def export_to_csv(self, result: ScheduleResult, report: Optional[FairnessReport] = None) -> str:
        """
        Export one row per field-pool player, in roster order.

        Args:
            result: Plan to export
            report: Optional pre-computed fairness report for the status column

        Returns:
            CSV formatted string with a header row
        """
        report = report or summarize_fairness(result)
        fairness = {summary.name: summary.fairness for summary in report.players}

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow([
            "Name", "Field Minutes", "Target Minutes", "Delta Minutes",
            "Goalie Minutes", "Fairness Status",
        ])
        for name, minutes in result.field_minutes.items():
            writer.writerow([
                name,
                minutes,
                f"{result.target_field_minutes:.1f}",
                f"{minutes - result.target_field_minutes:+.1f}",
                result.goalie_minutes.get(name, 0),
                fairness[name],
            ])
        if result.goalie_mode is GoalieMode.FIXED:
            for name, minutes in result.goalie_minutes.items():
                if name not in result.field_minutes:
                    writer.writerow([name, 0, "", "", minutes, "goalie"])

        csv_text = buffer.getvalue()
        buffer.close()
        return csv_text

"""Fair-share field minute calculations for the Rotation Planner."""

from fractions import Fraction
from typing import Dict, Iterable, Mapping

from ..models import RotationConfig
from .errors import InsufficientRosterError


def calculate_target_field_minutes(config: RotationConfig, total_players: int,
                                   fixed_goalie_mode: bool) -> float:
    """
    Fair share of field minutes per player.

    A fixed goalie never plays in the field, so the supply is split among the
    other ``total_players - 1`` players. With rotating goalies everyone takes
    part in the field-time pool.

    Args:
        config: Match configuration
        total_players: Roster size
        fixed_goalie_mode: Whether a single goalie keeps goal all match

    Returns:
        Target field minutes per player

    Raises:
        InsufficientRosterError: If no player is left to share the field minutes
    """
    sharing = total_players - 1 if fixed_goalie_mode else total_players
    if sharing <= 0:
        raise InsufficientRosterError(
            f"No players left to share field minutes with a roster of {total_players}"
        )
    return config.total_field_minutes / sharing


def initialize_field_minutes(players: Iterable[str]) -> Dict[str, int]:
    """Zeroed minute table keyed by player, in roster order."""
    return {player: 0 for player in players}


def fair_share_quotas(availability: Mapping[str, int], total_minutes: int) -> Dict[str, Fraction]:
    """
    Split ``total_minutes`` as evenly as availability allows.

    Players who cannot reach the even share (a rotating goalie spends whole
    periods in goal) are capped at their availability; what they leave behind
    is shared among the rest. Fractions keep the split exact.

    Args:
        availability: Non-goalie minutes each player could play, in roster order
        total_minutes: Field minutes to distribute

    Returns:
        Quota per player, in the order of ``availability``
    """
    remaining = dict(availability)
    pool = Fraction(total_minutes)
    quotas: Dict[str, Fraction] = {}
    while remaining:
        share = pool / len(remaining)
        capped = [player for player, minutes in remaining.items() if minutes < share]
        if not capped:
            for player in remaining:
                quotas[player] = share
            break
        for player in capped:
            quotas[player] = Fraction(remaining.pop(player))
            pool -= quotas[player]
    return {player: quotas[player] for player in availability}

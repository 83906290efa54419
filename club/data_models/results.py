"""
Result shapes returned by the query catalog.

Immutable data transfer objects for aggregate query rows.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from club.database.models import Player


@dataclass(frozen=True)
class MinMaxAmount:
    """Smallest and largest penalty amount, None when there are no penalties."""
    min_amount: Optional[Decimal]
    max_amount: Optional[Decimal]


@dataclass(frozen=True)
class GenderCount:
    """Number of players of one gender."""
    gender: str
    count: int


@dataclass(frozen=True)
class PlayerPenalties:
    """A player with the total of their penalty amounts (0 when they have none)."""
    player: Player
    penalty_sum: Decimal

"""
Canonical tennis club dataset.

Fourteen players and eight penalties. Used to bootstrap an empty database
and as the fixed dataset the query catalog is tested against.
"""

from datetime import date
from decimal import Decimal
from typing import Dict

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from club.database.models import Player, Penalty
from club.utils.logger import setup_logger

logger = setup_logger(__name__)


class SeedDataError(ValueError):
    """Raised when a seed row violates the dataset invariants"""
    pass


# (player_no, name, town, sex, year_of_birth)
PLAYERS = [
    (2, 'Everett', 'Stratford', 'M', 1948),
    (6, 'Parmenter', 'Stratford', 'M', 1964),
    (7, 'Wise', 'Stratford', 'M', 1963),
    (8, 'Newcastle', 'Inglewood', 'F', 1962),
    (27, 'Collins', 'Eltham', 'F', 1964),
    (28, 'Collins', 'Midhurst', 'F', 1963),
    (39, 'Bishop', 'Stratford', 'M', 1956),
    (44, 'Baker', 'Inglewood', 'M', 1963),
    (57, 'Brown', 'Stratford', 'M', 1971),
    (83, 'Hope', 'Stratford', 'M', 1956),
    (95, 'Miller', 'Douglas', 'M', 1963),
    (100, 'Parmenter', 'Stratford', 'M', 1963),
    (104, 'Moorman', 'Eltham', 'F', 1970),
    (112, 'Bailey', 'Plymouth', 'F', 1963),
]

# (payment_no, player_no, pen_date, amount)
PENALTIES = [
    (1, 6, date(1980, 12, 8), Decimal('100.00')),
    (2, 44, date(1981, 5, 5), Decimal('75.00')),
    (3, 27, date(1983, 9, 10), Decimal('100.00')),
    (4, 104, date(1984, 12, 8), Decimal('50.00')),
    (5, 44, date(1980, 12, 8), Decimal('25.00')),
    (6, 8, date(1980, 12, 8), Decimal('25.00')),
    (7, 44, date(1982, 12, 30), Decimal('30.00')),
    (8, 27, date(1984, 11, 12), Decimal('75.00')),
]


def validate_seed_rows(players=PLAYERS, penalties=PENALTIES) -> None:
    """
    Check seed rows before they reach the database.
    
    Raises:
        SeedDataError: On a duplicate identity, a sex outside 'M'/'F',
            a negative amount or a penalty for an unknown player
    """
    player_nos = set()
    for player_no, name, _town, sex, _year in players:
        if player_no in player_nos:
            raise SeedDataError(f"Duplicate player_no {player_no}")
        if not name:
            raise SeedDataError(f"Player {player_no} has no name")
        if sex not in ('M', 'F'):
            raise SeedDataError(f"Player {player_no} has invalid sex {sex!r}")
        player_nos.add(player_no)
    
    payment_nos = set()
    for payment_no, player_no, _pen_date, amount in penalties:
        if payment_no in payment_nos:
            raise SeedDataError(f"Duplicate payment_no {payment_no}")
        if player_no not in player_nos:
            raise SeedDataError(f"Penalty {payment_no} references unknown player {player_no}")
        if amount < 0:
            raise SeedDataError(f"Penalty {payment_no} has negative amount {amount}")
        payment_nos.add(payment_no)


async def load_tennis_club_data(
    session: AsyncSession,
    clear_existing: bool = False,
    players=PLAYERS,
    penalties=PENALTIES
) -> Dict[str, int]:
    """
    Insert the dataset into the given session.
    
    The session is flushed but not committed; the caller owns the transaction.
    
    Args:
        session: Session to insert into
        clear_existing: Delete all penalties and players first
        players: Player rows, defaults to the canonical dataset
        penalties: Penalty rows, defaults to the canonical dataset
        
    Returns:
        Dict with 'players' and 'penalties' insert counts
    """
    validate_seed_rows(players, penalties)
    
    if clear_existing:
        logger.warning("Clearing existing penalties and players...")
        await session.execute(delete(Penalty))
        await session.execute(delete(Player))
    
    for player_no, name, town, sex, year_of_birth in players:
        session.add(Player(
            player_no=player_no,
            name=name,
            town=town,
            sex=sex,
            year_of_birth=year_of_birth
        ))
    # Players must exist before their penalties reference them
    await session.flush()
    
    for payment_no, player_no, pen_date, amount in penalties:
        session.add(Penalty(
            payment_no=payment_no,
            player_no=player_no,
            pen_date=pen_date,
            amount=amount
        ))
    await session.flush()
    
    logger.info(f"Loaded {len(players)} players and {len(penalties)} penalties")
    return {'players': len(players), 'penalties': len(penalties)}

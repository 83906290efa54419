"""
Query catalog for the tennis club.

Read-only reporting queries over players and the penalties issued to them:
who lives where, who is of which gender and age, which penalties fall in a
date or amount range, aggregate statistics and per-player totals.

Every query accepts an optional session. When given, the query runs in the
caller's transaction and the session is left open; otherwise a new session
is opened and closed around the query. Database errors propagate unchanged.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from club.services.base import BaseService
from club.data_models.results import MinMaxAmount, GenderCount, PlayerPenalties
from club.database.models import Player, Penalty
from club.utils.logger import setup_logger

logger = setup_logger(__name__)


class Repository(BaseService):
    """Read-only queries over players and penalties."""
    
    async def get_players_living_in_town(
        self,
        town: str,
        session: Optional['AsyncSession'] = None
    ) -> List[Player]:
        """
        Get players living in the given town.
        
        Args:
            town: Name of the town, compared exactly and case-sensitively
        """
        query = select(Player).where(Player.town == town)
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            players = list(result.scalars().all())
        
        logger.debug(f"Found {len(players)} players living in {town!r}")
        return players
    
    async def get_players_living_in_towns(
        self,
        towns: Sequence[str],
        session: Optional['AsyncSession'] = None
    ) -> List[Player]:
        """
        Get players living in one of the given towns.
        
        An empty sequence of towns matches no players. Each matching player
        is returned once, however often their town is listed.
        
        Args:
            towns: Names of towns
        """
        towns = list(towns)
        query = select(Player).where(Player.town.in_(towns))
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            players = list(result.scalars().all())
        
        logger.debug(f"Found {len(players)} players living in {towns}")
        return players
    
    async def get_players_with_gender_and_age(
        self,
        female: bool,
        born_before_year: int,
        session: Optional['AsyncSession'] = None
    ) -> List[Player]:
        """
        Get players of a gender born before a year.
        
        Args:
            female: True for female ('F') players, False for male ('M')
            born_before_year: Exclusive bound; players born in this year are not returned
        """
        sex = 'F' if female else 'M'
        query = select(Player).where(
            Player.sex == sex,
            Player.year_of_birth < born_before_year
        )
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            players = list(result.scalars().all())
        
        logger.debug(f"Found {len(players)} players with sex {sex} born before {born_before_year}")
        return players
    
    async def get_penalties_in_date_range(
        self,
        start: date,
        end: date,
        session: Optional['AsyncSession'] = None
    ) -> List[Penalty]:
        """
        Get penalties issued between two dates.
        
        Both dates are inclusive. The bounds are not swapped when start is
        after end, so an inverted range matches nothing.
        
        Args:
            start: The first (earlier) date
            end: The second (later) date
        """
        query = select(Penalty).where(Penalty.pen_date.between(start, end))
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            penalties = list(result.scalars().all())
        
        logger.debug(f"Found {len(penalties)} penalties between {start} and {end}")
        return penalties
    
    async def get_penalties_with_amount_higher_equal_than(
        self,
        amount: Decimal,
        session: Optional['AsyncSession'] = None
    ) -> List[Penalty]:
        """Get penalties with an amount higher than or equal to the given amount."""
        query = select(Penalty).where(Penalty.amount >= amount)
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            penalties = list(result.scalars().all())
        
        logger.debug(f"Found {len(penalties)} penalties with amount >= {amount}")
        return penalties
    
    async def get_average_penalty_amount(
        self,
        session: Optional['AsyncSession'] = None
    ) -> Optional[float]:
        """
        Get the average amount over all penalties.
        
        Returns:
            The mean amount, or None when there are no penalties
        """
        query = select(func.avg(Penalty.amount))
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            average = result.scalar_one()
        
        logger.debug(f"Average penalty amount: {average}")
        return float(average) if average is not None else None
    
    async def get_min_max_penalty_amount(
        self,
        session: Optional['AsyncSession'] = None
    ) -> MinMaxAmount:
        """
        Get the smallest and largest penalty amount.
        
        Both aggregates come from the same row of a single query. With no
        penalties both fields are None.
        """
        query = select(
            func.min(Penalty.amount).label('min_amount'),
            func.max(Penalty.amount).label('max_amount')
        )
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            row = result.one()
        
        logger.debug(f"Penalty amounts range from {row.min_amount} to {row.max_amount}")
        return MinMaxAmount(min_amount=row.min_amount, max_amount=row.max_amount)
    
    async def get_players_with_penalties(
        self,
        has_penalty: bool,
        session: Optional['AsyncSession'] = None
    ) -> List[Player]:
        """
        Get all players who either have or have not received a penalty so far.
        
        Args:
            has_penalty: True for players with at least one penalty,
                False for players without any
        """
        penalty_count = func.count(Penalty.payment_no)
        query = select(Player).outerjoin(
            Player.penalties
        ).group_by(
            Player.player_no
        ).having(
            penalty_count >= 1 if has_penalty else penalty_count == 0
        )
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            players = list(result.scalars().all())
        
        logger.debug(f"Found {len(players)} players with has_penalty={has_penalty}")
        return players
    
    async def get_towns_with_player_number(
        self,
        min_players: int,
        session: Optional['AsyncSession'] = None
    ) -> List[str]:
        """
        Get the towns with at least as many resident players as given.
        
        Args:
            min_players: The minimum number of players a town has to have
        """
        query = select(Player.town).group_by(
            Player.town
        ).having(
            func.count(Player.player_no) >= min_players
        )
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            towns = list(result.scalars().all())
        
        logger.debug(f"Found {len(towns)} towns with at least {min_players} players")
        return towns
    
    async def get_player_counts_by_gender(
        self,
        session: Optional['AsyncSession'] = None
    ) -> Dict[str, int]:
        """
        Get the number of players for each gender.
        
        Only genders that occur among the players appear as keys.
        """
        query = select(
            Player.sex,
            func.count(Player.player_no)
        ).group_by(Player.sex)
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            gender_counts = [GenderCount(gender=sex, count=count) for sex, count in result.all()]
        
        counts = {gc.gender: gc.count for gc in gender_counts}
        logger.debug(f"Player counts by gender: {counts}")
        return counts
    
    async def get_penalties_for_all_players(
        self,
        session: Optional['AsyncSession'] = None
    ) -> List[PlayerPenalties]:
        """
        Get the penalty sum for every player.
        
        Players who never received a penalty are included with a sum of 0,
        so the result has exactly one entry per player.
        """
        penalty_sum = func.sum(
            func.coalesce(Penalty.amount, Decimal('0'))
        ).label('penalty_sum')
        query = select(Player, penalty_sum).outerjoin(
            Player.penalties
        ).group_by(
            Player.player_no
        )
        
        async with self.get_session(session) as s:
            result = await s.execute(query)
            totals = [
                PlayerPenalties(player=player, penalty_sum=Decimal(total))
                for player, total in result.all()
            ]
        
        logger.debug(f"Calculated penalty sums for {len(totals)} players")
        return totals

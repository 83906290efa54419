from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy import select, func
from contextlib import asynccontextmanager

from club.config import Config
from club.database.models import Base, Player, Penalty
from club.database.seed import load_tennis_club_data
from club.utils.logger import setup_logger

class Database:
    def __init__(self, database_url: Optional[str] = None):
        self.logger = setup_logger(__name__)
        self.database_url = database_url
        self.engine = None
        self.async_session = None
        
    async def initialize(self, seed: Optional[bool] = None):
        """Initialize the database connection and create tables"""
        self.logger.info("Initializing database...")
        
        # Convert sqlite URL to async if needed
        database_url = Config.get_async_database_url(self.database_url)
        
        engine_kwargs = {}
        if ':memory:' in database_url:
            # One shared connection, otherwise every session sees its own empty database
            engine_kwargs['poolclass'] = StaticPool
            engine_kwargs['connect_args'] = {'check_same_thread': False}
        
        self.engine = create_async_engine(
            database_url,
            echo=Config.DEBUG,
            **engine_kwargs
        )
        
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )
        
        # Create all tables
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            
        self.logger.info("Database initialized successfully")
        
        if seed is None:
            seed = Config.SEED_DEFAULT_DATA
        if seed:
            await self.initialize_default_data()
        
    async def initialize_default_data(self):
        """Load the tennis club dataset into an empty database"""
        player_count = await self.count_players()
        if player_count == 0:
            self.logger.info("Initializing default tennis club data...")
            async with self.transaction() as session:
                counts = await load_tennis_club_data(session)
            self.logger.info(f"Added {counts['players']} players and {counts['penalties']} penalties")
        else:
            self.logger.debug(f"Found {player_count} players, skipping default data")
    
    @property
    def session_factory(self) -> async_sessionmaker:
        """Session factory handed to services"""
        if self.async_session is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self.async_session
    
    @asynccontextmanager
    async def get_session(self):
        """Get a database session"""
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()
    
    @asynccontextmanager
    async def transaction(self):
        """
        Create a transaction boundary for atomic operations.
        
        All operations within the context are committed together on success,
        or rolled back together on failure.
        
        Usage:
            async with db.transaction() as session:
                await load_tennis_club_data(session, clear_existing=True)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()
    
    async def close(self):
        """Close the database connection"""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.async_session = None
            self.logger.info("Database connection closed")
    
    async def count_players(self) -> int:
        """Get the total number of players"""
        async with self.get_session() as session:
            result = await session.execute(select(func.count(Player.player_no)))
            return result.scalar()
    
    async def count_penalties(self) -> int:
        """Get the total number of penalties"""
        async with self.get_session() as session:
            result = await session.execute(select(func.count(Penalty.payment_no)))
            return result.scalar()

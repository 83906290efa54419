"""
Base service class for the tennis club data-access layer.

Provides async database session management for read-only services.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncSession

class BaseService:
    """Base class for all services with async database session management."""
    
    def __init__(self, session_factory):
        """
        Initialize base service with session factory.
        
        Args:
            session_factory: Async session factory from Database class
        """
        self.session_factory = session_factory
    
    @asynccontextmanager
    async def get_session(
        self, session: Optional[AsyncSession] = None
    ) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a read scope for async database operations.
        
        Uses the provided session if available, without managing its
        lifecycle. Otherwise opens a new session and closes it afterwards.
        Nothing is committed.
        """
        if session is not None:
            yield session
            return
        
        new_session = self.session_factory()
        try:
            yield new_session
        except Exception:
            await new_session.rollback()
            raise
        finally:
            await new_session.close()

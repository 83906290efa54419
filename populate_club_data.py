#!/usr/bin/env python3
"""
Tennis club data population

Standalone script for loading the canonical players and penalties into the
database configured by DATABASE_URL.

This script can be run independently or imported for its populate function.
"""

import sys
import asyncio
import argparse
from typing import Dict, Optional

from club.config import Config
from club.database.database import Database
from club.database.seed import load_tennis_club_data
from club.utils.logger import setup_logger

logger = setup_logger(__name__)


async def populate_tennis_club(
    clear_existing: bool = False,
    database_url: Optional[str] = None
) -> Dict[str, int]:
    """
    Load the tennis club dataset.
    
    Args:
        clear_existing: Delete existing players and penalties first
        database_url: Override for Config.DATABASE_URL
        
    Returns:
        Dict with 'players' and 'penalties' insert counts
    """
    db = Database(database_url)
    try:
        await db.initialize(seed=False)
        
        existing = await db.count_players()
        if existing and not clear_existing:
            logger.warning(f"Database already holds {existing} players, nothing loaded (use --clear)")
            return {'players': 0, 'penalties': 0}
        
        async with db.transaction() as session:
            results = await load_tennis_club_data(session, clear_existing=clear_existing)
            
    except Exception as e:
        logger.error(f"Error during tennis club population: {e}")
        raise
    finally:
        await db.close()
    
    logger.info(
        f"Tennis club population completed: "
        f"{results['players']} players, "
        f"{results['penalties']} penalties"
    )
    
    return results


async def main(argv=None):
    """Main entry point for standalone script execution"""
    parser = argparse.ArgumentParser(description="Load the tennis club dataset")
    parser.add_argument('--clear', action='store_true', help="delete existing players and penalties first")
    args = parser.parse_args(argv)
    
    try:
        Config.validate()
        logger.info("Starting tennis club population script...")
        results = await populate_tennis_club(clear_existing=args.clear)
        
        print("\n" + "="*50)
        print("TENNIS CLUB POPULATION COMPLETED")
        print("="*50)
        print(f"Players created: {results['players']}")
        print(f"Penalties created: {results['penalties']}")
        print("="*50)
        
    except Exception as e:
        logger.error(f"Tennis club population failed: {e}")
        print(f"\nERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())

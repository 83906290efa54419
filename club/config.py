import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Tennis club data-access settings"""
    
    # Database settings
    DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///tennis_club.db')
    SEED_DEFAULT_DATA = os.getenv('SEED_DEFAULT_DATA', 'True').lower() == 'true'
    
    # Logging settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_DIR = os.getenv('LOG_DIR', 'logs')  # Empty string disables the file handler
    
    @classmethod
    def get_async_database_url(cls, database_url=None):
        """Get the database URL with an async driver"""
        url = database_url or cls.DATABASE_URL
        if url.startswith('sqlite:///'):
            url = url.replace('sqlite:///', 'sqlite+aiosqlite:///', 1)
        return url
    
    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DATABASE_URL:
            raise ValueError("DATABASE_URL is required")

"""
Services Layer

Services receive a session factory from the Database class and run
read-only queries against the players/penalties entity view.

- Repository: the query catalog answering the club's reporting questions
"""

from club.services.base import BaseService
from club.services.repository import Repository

__all__ = ['BaseService', 'Repository']

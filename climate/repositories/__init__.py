"""
Package repositories.
Espone i Repository per l'accesso ai dati.
"""

from .user_repo import UserRepository
from .carbon_entry_repo import CarbonEntryRepository
from .news_repo import NewsArticleRepository, BookmarkRepository
from .community_repo import PostRepository, CommentRepository, VoteRepository
from .report_repo import ReportRepository

__all__ = [
    "UserRepository",
    "CarbonEntryRepository",
    "NewsArticleRepository",
    "BookmarkRepository",
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
    "ReportRepository",
]

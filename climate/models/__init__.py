"""
Pacchetto per i modelli SQLAlchemy.

Qui vengono esportate le classi modello principali.
"""

from .user import User, USER_ROLES
from .carbon_entry import CarbonEntry, CARBON_EMISSION_FACTORS, calculate_emissions
from .news_article import NewsArticle
from .bookmark import Bookmark
from .post import Post
from .comment import Comment
from .vote import Vote, VOTE_TYPES
from .report import Report, REPORT_STATUSES

__all__ = [
    "User",
    "USER_ROLES",
    "CarbonEntry",
    "CARBON_EMISSION_FACTORS",
    "calculate_emissions",
    "NewsArticle",
    "Bookmark",
    "Post",
    "Comment",
    "Vote",
    "VOTE_TYPES",
    "Report",
    "REPORT_STATUSES",
]

"""
Unit of Work Pattern.
Gestisce la transazione del database atomica e l'accesso ai repository.
"""
from typing import Optional
from climate.extensions import db

from climate.repositories import (
    BookmarkRepository,
    CarbonEntryRepository,
    CommentRepository,
    NewsArticleRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
    VoteRepository,
)

class UnitOfWork:
    def __init__(self):
        self.session = db.session
        self._users: Optional[UserRepository] = None
        self._carbon_entries: Optional[CarbonEntryRepository] = None
        self._articles: Optional[NewsArticleRepository] = None
        self._bookmarks: Optional[BookmarkRepository] = None
        self._posts: Optional[PostRepository] = None
        self._comments: Optional[CommentRepository] = None
        self._votes: Optional[VoteRepository] = None
        self._reports: Optional[ReportRepository] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.rollback()
            return False
        # Flask gestisce la chiusura della sessione, non chiudere qui

    @property
    def users(self) -> UserRepository:
        if self._users is None:
            self._users = UserRepository(self.session)
        return self._users

    @property
    def carbon_entries(self) -> CarbonEntryRepository:
        if self._carbon_entries is None:
            self._carbon_entries = CarbonEntryRepository(self.session)
        return self._carbon_entries

    @property
    def articles(self) -> NewsArticleRepository:
        if self._articles is None:
            self._articles = NewsArticleRepository(self.session)
        return self._articles

    @property
    def bookmarks(self) -> BookmarkRepository:
        if self._bookmarks is None:
            self._bookmarks = BookmarkRepository(self.session)
        return self._bookmarks

    @property
    def posts(self) -> PostRepository:
        if self._posts is None:
            self._posts = PostRepository(self.session)
        return self._posts

    @property
    def comments(self) -> CommentRepository:
        if self._comments is None:
            self._comments = CommentRepository(self.session)
        return self._comments

    @property
    def votes(self) -> VoteRepository:
        if self._votes is None:
            self._votes = VoteRepository(self.session)
        return self._votes

    @property
    def reports(self) -> ReportRepository:
        if self._reports is None:
            self._reports = ReportRepository(self.session)
        return self._reports

    def flush(self):
        self.session.flush()

    def commit(self):
        try:
            self.session.commit()
        except Exception:
            self.rollback()
            raise

    def rollback(self):
        self.session.rollback()

"""
Repository specifico per Report (coda di moderazione).
"""
from typing import List

from sqlalchemy.orm import aliased

from climate.models import Post, Report, User
from climate.repositories.base import SqlAlchemyRepository

class ReportRepository(SqlAlchemyRepository[Report]):
    def __init__(self, session):
        super().__init__(session, Report)

    def list_with_labels(self) -> List[dict]:
        """
        Segnalazioni dalla più recente, con nome di chi segnala,
        nome dell'utente segnalato e titolo del post (se presenti).
        """
        reporter = aliased(User)
        reported = aliased(User)
        rows = (
            self.session.query(
                Report,
                reporter.name,
                reported.name,
                Post.title,
            )
            .outerjoin(reporter, Report.reporter_user_id == reporter.id)
            .outerjoin(reported, Report.reported_user_id == reported.id)
            .outerjoin(Post, Report.post_id == Post.id)
            .order_by(Report.created_at.desc(), Report.id.desc())
            .all()
        )

        results = []
        for report, reporter_name, reported_name, post_title in rows:
            results.append(
                {
                    "id": report.id,
                    "reason": report.reason,
                    "status": report.status,
                    "created_at": report.created_at.isoformat() if report.created_at else None,
                    "reporter_name": reporter_name,
                    "reported_name": reported_name,
                    "post_title": post_title,
                }
            )
        return results

"""
Pacchetto per i servizi (logica di business) dell'applicazione.

I servizi orchestrano:
- repository (accesso al DB) tramite UnitOfWork
- validazione dell'input ed errori tipizzati (services.errors)
- controlli di autorizzazione sulle risorse
- logging strutturato
"""

from .auth_service import (
    register_user,
    create_admin_user,
    authenticate,
    issue_token,
)
from .carbon_service import (
    list_entries,
    create_entry,
    update_entry,
    delete_entry,
    get_analytics,
)
from .news_service import (
    list_articles,
    get_article,
    add_bookmark,
    list_bookmarks,
    remove_bookmark,
    fetch_news,
)
from .community_service import (
    list_posts,
    get_post_detail,
    create_post,
    update_post,
    delete_post,
    add_comment,
    update_comment,
    delete_comment,
    cast_vote,
    create_report,
)
from .admin_service import (
    get_stats,
    list_users,
    update_user_role,
    delete_user,
    list_reports,
    update_report_status,
)

__all__ = [
    # Auth
    "register_user",
    "create_admin_user",
    "authenticate",
    "issue_token",
    # Carbon
    "list_entries",
    "create_entry",
    "update_entry",
    "delete_entry",
    "get_analytics",
    # News
    "list_articles",
    "get_article",
    "add_bookmark",
    "list_bookmarks",
    "remove_bookmark",
    "fetch_news",
    # Community
    "list_posts",
    "get_post_detail",
    "create_post",
    "update_post",
    "delete_post",
    "add_comment",
    "update_comment",
    "delete_comment",
    "cast_vote",
    "create_report",
    # Admin
    "get_stats",
    "list_users",
    "update_user_role",
    "delete_user",
    "list_reports",
    "update_report_status",
]

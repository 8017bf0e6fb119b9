"""
Controlli di autorizzazione a livello di risorsa.

Regola unica: un post o un commento può essere modificato/eliminato
dal suo autore oppure da un utente con ruolo admin.
La risorsa mancante produce 404 prima del controllo dei permessi.
"""

from __future__ import annotations

from climate.models import Comment, Post, User
from climate.services.errors import NotFoundError, PermissionDeniedError
from climate.services.unit_of_work import UnitOfWork


def can_modify(actor: User, owner_id: int) -> bool:
    return actor is not None and (actor.id == owner_id or actor.is_admin)


def get_post_for_update(uow: UnitOfWork, post_id: int, actor: User) -> Post:
    post = uow.posts.get_by_id(post_id)
    if post is None:
        raise NotFoundError("Post non trovato.")
    if not can_modify(actor, post.user_id):
        raise PermissionDeniedError("Non sei autorizzato a modificare questo post.")
    return post


def get_comment_for_update(uow: UnitOfWork, comment_id: int, actor: User) -> Comment:
    """Conta solo il ruolo di chi agisce: il ruolo dell'autore del post non viene considerato."""
    comment = uow.comments.get_by_id(comment_id)
    if comment is None:
        raise NotFoundError("Commento non trovato.")
    if not can_modify(actor, comment.user_id):
        raise PermissionDeniedError("Non sei autorizzato a modificare questo commento.")
    return comment

"""
Servizi per la community: post, commenti, voti e segnalazioni.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from climate.models import Comment, Post, Report, User, Vote, VOTE_TYPES
from climate.services.errors import NotFoundError, ValidationError
from climate.services.logging import log_structured_event
from climate.services.permissions import get_comment_for_update, get_post_for_update
from climate.services.unit_of_work import UnitOfWork
from climate.services.validation import optional_text, parse_id, require_choice, require_text


# ---------------------------------------------------------------------
# Post
# ---------------------------------------------------------------------
def list_posts(
    category: Optional[str] = None, limit: int = 20, offset: int = 0
) -> List[dict]:
    """Post dal più recente, con nome autore e punteggio voti."""
    with UnitOfWork() as uow:
        posts = uow.posts.search(category=category, limit=limit, offset=offset)
        scores = uow.votes.scores_for_posts(p.id for p in posts)
        return [p.to_dict(vote_score=scores.get(p.id, 0)) for p in posts]


def get_post_detail(post_id: int) -> dict:
    """Post con autore, ruolo autore, punteggio e commenti in ordine cronologico."""
    with UnitOfWork() as uow:
        post = uow.posts.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Post non trovato.")
        detail = post.to_dict(vote_score=uow.votes.score_for_post(post.id))
        detail["comments"] = [c.to_dict() for c in uow.comments.list_by_post(post.id)]
        return detail


def create_post(user_id: int, data: dict) -> dict:
    title = require_text(data.get("title"), "title", max_length=255)
    content = require_text(data.get("content"), "content")
    category = optional_text(data.get("category"), max_length=64)

    with UnitOfWork() as uow:
        post = Post(user_id=user_id, title=title, content=content, category=category)
        uow.posts.add(post)
        uow.commit()
        result = post.to_dict()

    log_structured_event("create_post", user_id=user_id, post_id=result["id"])
    return result


def update_post(actor: User, post_id: int, data: dict) -> dict:
    with UnitOfWork() as uow:
        post = get_post_for_update(uow, post_id, actor)

        post.title = require_text(data.get("title"), "title", max_length=255)
        post.content = require_text(data.get("content"), "content")
        post.category = optional_text(data.get("category"), max_length=64)
        uow.commit()
        result = post.to_dict(vote_score=uow.votes.score_for_post(post.id))

    log_structured_event("update_post", user_id=actor.id, post_id=post_id)
    return result


def delete_post(actor: User, post_id: int) -> None:
    """Elimina il post insieme a commenti e voti."""
    with UnitOfWork() as uow:
        post = get_post_for_update(uow, post_id, actor)
        uow.posts.delete(post)
        uow.commit()

    log_structured_event("delete_post", user_id=actor.id, post_id=post_id)


# ---------------------------------------------------------------------
# Commenti
# ---------------------------------------------------------------------
def add_comment(user_id: int, data: dict) -> dict:
    post_id = parse_id(data.get("post_id"), "post_id")
    content = require_text(data.get("content"), "content")

    with UnitOfWork() as uow:
        if uow.posts.get_by_id(post_id) is None:
            raise NotFoundError("Post non trovato.")

        comment = Comment(user_id=user_id, post_id=post_id, content=content)
        uow.comments.add(comment)
        uow.commit()
        result = comment.to_dict()

    log_structured_event(
        "add_comment", user_id=user_id, post_id=post_id, comment_id=result["id"]
    )
    return result


def update_comment(actor: User, comment_id: int, data: dict) -> dict:
    with UnitOfWork() as uow:
        comment = get_comment_for_update(uow, comment_id, actor)
        comment.content = require_text(data.get("content"), "content")
        uow.commit()
        result = comment.to_dict()

    log_structured_event("update_comment", user_id=actor.id, comment_id=comment_id)
    return result


def delete_comment(actor: User, comment_id: int) -> None:
    with UnitOfWork() as uow:
        comment = get_comment_for_update(uow, comment_id, actor)
        uow.comments.delete(comment)
        uow.commit()

    log_structured_event("delete_comment", user_id=actor.id, comment_id=comment_id)


# ---------------------------------------------------------------------
# Voti
# ---------------------------------------------------------------------
def cast_vote(user_id: int, data: dict) -> Tuple[int, str]:
    """
    Registra o cambia il voto dell'utente sul post (upsert su (user, post)).

    Ritorna (vote_score, vote_type) con il punteggio ricalcolato.
    """
    vote_type = require_choice(
        data.get("vote_type"),
        VOTE_TYPES,
        'Tipo di voto non valido. Usa "up" o "down".',
    )
    post_id = parse_id(data.get("post_id"), "post_id")

    with UnitOfWork() as uow:
        if uow.posts.get_by_id(post_id) is None:
            raise NotFoundError("Post non trovato.")

        vote = uow.votes.get_for_user_post(user_id, post_id)
        if vote is not None:
            vote.vote_type = vote_type
            uow.commit()
        else:
            uow.votes.add(Vote(user_id=user_id, post_id=post_id, vote_type=vote_type))
            try:
                uow.commit()
            except IntegrityError:
                # Un voto concorrente ha già creato la riga: la aggiorniamo
                vote = uow.votes.get_for_user_post(user_id, post_id)
                if vote is None:
                    raise
                vote.vote_type = vote_type
                uow.commit()

        score = uow.votes.score_for_post(post_id)

    log_structured_event(
        "vote_post", user_id=user_id, post_id=post_id, vote_type=vote_type, vote_score=score
    )
    return score, vote_type


# ---------------------------------------------------------------------
# Segnalazioni
# ---------------------------------------------------------------------
def create_report(reporter_id: int, data: dict) -> Report:
    """Segnala un post e/o un utente alla moderazione (stato iniziale 'pending')."""
    reason = require_text(data.get("reason"), "reason")

    raw_post_id = data.get("post_id")
    raw_user_id = data.get("reported_user_id")
    if raw_post_id in (None, "") and raw_user_id in (None, ""):
        raise ValidationError("Indica il post o l'utente da segnalare.")

    with UnitOfWork() as uow:
        post_id = None
        reported_user_id = None

        if raw_post_id not in (None, ""):
            post = uow.posts.get_by_id(parse_id(raw_post_id, "post_id"))
            if post is None:
                raise NotFoundError("Post non trovato.")
            post_id = post.id
            reported_user_id = post.user_id

        if raw_user_id not in (None, ""):
            reported = uow.users.get_by_id(parse_id(raw_user_id, "reported_user_id"))
            if reported is None:
                raise NotFoundError("Utente non trovato.")
            reported_user_id = reported.id

        report = Report(
            reporter_user_id=reporter_id,
            reported_user_id=reported_user_id,
            post_id=post_id,
            reason=reason,
            status="pending",
        )
        uow.reports.add(report)
        uow.commit()

    log_structured_event(
        "create_report",
        reporter_user_id=reporter_id,
        report_id=report.id,
        post_id=post_id,
        reported_user_id=reported_user_id,
    )
    return report

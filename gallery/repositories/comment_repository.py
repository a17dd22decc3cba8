from gallery.db import db
from gallery.models.comment_model import Comment
from gallery.models.poster_model import utcnow


def append_comment(poster, text, author):
    now = utcnow()
    comment = Comment(
        poster_id=poster.id,
        text=text,
        author=author,
        created_at=now,
    )
    poster.comments.append(comment)
    poster.updated_at = now

    db.session.add(comment)
    return comment

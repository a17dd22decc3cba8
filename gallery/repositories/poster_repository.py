from gallery.db import db
from gallery.models.poster_model import Poster, utcnow


def create_poster(title, image_url, description=None, category=None,
                  tags=None, display_date=None):
    poster = Poster(
        title=title,
        image_url=image_url,
        description=description,
        category=category,
        tags=tags or [],
        display_date=display_date,
        likes=0,
    )
    db.session.add(poster)
    db.session.flush()

    return poster


def get_by_id(poster_id: int):
    return db.session.get(Poster, poster_id)


def list_newest_first():
    return (
        Poster.query
        .order_by(Poster.created_at.desc(), Poster.id.desc())
        .all()
    )


def increment_likes(poster_id: int) -> bool:
    result = db.session.execute(
        db.update(Poster)
        .where(Poster.id == poster_id)
        .values(likes=Poster.likes + 1, updated_at=utcnow())
    )
    return result.rowcount > 0


def delete_poster(poster):
    db.session.delete(poster)

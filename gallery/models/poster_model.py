from datetime import datetime, timezone

from gallery.db import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Poster(db.Model):
    __tablename__ = "posters"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    image_url = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(120), nullable=True)
    tags = db.Column(db.JSON, nullable=False, default=list)
    display_date = db.Column(db.DateTime, nullable=True)
    likes = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    comments = db.relationship(
        "Comment",
        backref="poster",
        lazy="select",
        order_by="Comment.id",
        cascade="all, delete-orphan",
    )

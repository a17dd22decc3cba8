from gallery.db import db
from gallery.models.poster_model import utcnow


class Comment(db.Model):
    __tablename__ = "comments"

    id = db.Column(db.Integer, primary_key=True)

    poster_id = db.Column(
        db.Integer,
        db.ForeignKey("posters.id", ondelete="CASCADE"),
        nullable=False
    )

    text = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(120), nullable=False)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

from datetime import datetime, timezone

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from gallery.db import db
from gallery.models.poster_model import utcnow
from gallery.repositories import comment_repository, poster_repository
from gallery.schemas.poster_schema import PosterResponseSchema
from gallery.services import upload_service


poster_schema = PosterResponseSchema()
posters_schema = PosterResponseSchema(many=True)


class PosterNotFoundError(Exception):
    pass


# Column limits in gallery.models.
TITLE_MAX_LENGTH = 255
CATEGORY_MAX_LENGTH = 120
AUTHOR_MAX_LENGTH = 120


def _check_length(value, limit, name):
    if value is not None and len(value) > limit:
        raise ValueError(f"{name} must be at most {limit} characters")
    return value


def _clean_optional(value):
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("Text fields must be strings")
    return value.strip()


def _clean_title(title):
    if not isinstance(title, str) or not title.strip():
        raise ValueError("Title is required")
    return _check_length(title.strip(), TITLE_MAX_LENGTH, "Title")


def _clean_category(category):
    return _check_length(_clean_optional(category), CATEGORY_MAX_LENGTH, "Category")


def parse_tags(raw):
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.split(",")
    if not isinstance(raw, list):
        raise ValueError("Tags must be a comma separated string or a list")
    if not all(isinstance(tag, str) for tag in raw):
        raise ValueError("Tags must be strings")
    return [tag.strip() for tag in raw if tag.strip()]


def parse_display_date(raw):
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    if not isinstance(raw, str):
        raise ValueError("Invalid displayDate")

    value = raw.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValueError("Invalid displayDate") from None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _get_or_raise(poster_id: int):
    poster = poster_repository.get_by_id(poster_id)
    if not poster:
        raise PosterNotFoundError("Poster not found")
    return poster


def _discard_new_image(image_url):
    db.session.rollback()
    if image_url:
        upload_service.delete_image(image_url)


def list_posters():
    return posters_schema.dump(poster_repository.list_newest_first())


def create_poster(fields, image):
    fields = fields or {}
    title = _clean_title(fields.get("title"))
    description = _clean_optional(fields.get("description"))
    category = _clean_category(fields.get("category"))
    tags = parse_tags(fields.get("tags"))
    display_date = parse_display_date(fields.get("displayDate")) or utcnow()

    filename = upload_service.save_image(image)
    image_url = upload_service.build_image_url(filename)

    try:
        poster = poster_repository.create_poster(
            title=title,
            image_url=image_url,
            description=description,
            category=category,
            tags=tags,
            display_date=display_date,
        )
        db.session.commit()
    except SQLAlchemyError:
        _discard_new_image(image_url)
        raise

    current_app.logger.info("Created poster %s", poster.id)
    return poster_schema.dump(poster)


def like_poster(poster_id: int):
    if not poster_repository.increment_likes(poster_id):
        db.session.rollback()
        raise PosterNotFoundError("Poster not found")
    db.session.commit()

    return poster_schema.dump(_get_or_raise(poster_id))


def add_comment(poster_id: int, text, author):
    if not isinstance(text, str) or not text.strip():
        raise ValueError("Comment text is required")
    if not isinstance(author, str) or not author.strip():
        raise ValueError("Comment author is required")
    _check_length(author.strip(), AUTHOR_MAX_LENGTH, "Author")

    poster = _get_or_raise(poster_id)
    comment_repository.append_comment(poster, text.strip(), author.strip())
    db.session.commit()

    return poster_schema.dump(poster)


def update_poster(poster_id: int, fields, image=None):
    fields = fields or {}
    poster = _get_or_raise(poster_id)

    changes = {}
    if "title" in fields:
        changes["title"] = _clean_title(fields["title"])
    if "description" in fields:
        changes["description"] = _clean_optional(fields["description"])
    if "category" in fields:
        changes["category"] = _clean_category(fields["category"])
    if "tags" in fields:
        changes["tags"] = parse_tags(fields["tags"])
    if "displayDate" in fields:
        display_date = parse_display_date(fields["displayDate"])
        if display_date is not None:
            changes["display_date"] = display_date

    new_image_url = None
    if image is not None and getattr(image, "filename", ""):
        new_image_url = upload_service.build_image_url(
            upload_service.save_image(image)
        )
        changes["image_url"] = new_image_url

    previous_image_url = poster.image_url
    try:
        for attr, value in changes.items():
            setattr(poster, attr, value)
        poster.updated_at = utcnow()
        db.session.commit()
    except SQLAlchemyError:
        _discard_new_image(new_image_url)
        raise

    if new_image_url:
        upload_service.delete_image(previous_image_url)

    return poster_schema.dump(poster)


def delete_poster(poster_id: int):
    poster = _get_or_raise(poster_id)
    image_url = poster.image_url

    poster_repository.delete_poster(poster)
    db.session.commit()

    upload_service.delete_image(image_url)
    current_app.logger.info("Deleted poster %s", poster_id)

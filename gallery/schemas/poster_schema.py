from gallery.extensions.extensions import ma


# Stored timestamps are naive UTC.
UTC_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


class CommentResponseSchema(ma.Schema):
    id = ma.Int()
    text = ma.Str()
    author = ma.Str()
    created_at = ma.DateTime(format=UTC_FORMAT, data_key="createdAt")


class PosterResponseSchema(ma.Schema):
    id = ma.Int()
    title = ma.Str()
    image_url = ma.Str(data_key="imageUrl")
    description = ma.Str(allow_none=True)
    category = ma.Str(allow_none=True)
    tags = ma.List(ma.Str())
    display_date = ma.DateTime(format=UTC_FORMAT, data_key="displayDate", allow_none=True)
    likes = ma.Int()
    comments = ma.List(ma.Nested(CommentResponseSchema))
    created_at = ma.DateTime(format=UTC_FORMAT, data_key="createdAt")
    updated_at = ma.DateTime(format=UTC_FORMAT, data_key="updatedAt")

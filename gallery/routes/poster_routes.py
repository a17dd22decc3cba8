from flask import Blueprint, jsonify, request

from gallery.services import poster_service
from gallery.services.poster_service import PosterNotFoundError
from gallery.services.upload_service import MediaStorageError


poster_bp = Blueprint("posters", __name__)


def _read_poster_form():
    content_type = (request.content_type or "").lower()

    if "multipart/form-data" in content_type or "application/x-www-form-urlencoded" in content_type:
        return request.form.to_dict(), request.files.get("image")

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, None
    return data, None


@poster_bp.route("/post", methods=["GET"])
def list_posters():
    return jsonify(poster_service.list_posters()), 200


@poster_bp.route("/post", methods=["POST"])
def create_poster():
    fields, image = _read_poster_form()
    if fields is None:
        return jsonify({"error": "Invalid request body"}), 400

    try:
        poster = poster_service.create_poster(fields, image)
        return jsonify(poster), 201
    except MediaStorageError as e:
        return jsonify({"error": str(e)}), 500
    except ValueError as e:
        return jsonify({"error": str(e)}), 400


@poster_bp.route("/post/<int:poster_id>/like", methods=["POST"])
def like_poster(poster_id):
    try:
        return jsonify(poster_service.like_poster(poster_id)), 200
    except PosterNotFoundError as e:
        return jsonify({"error": str(e)}), 404


@poster_bp.route("/post/<int:poster_id>/comment", methods=["POST"])
def comment_poster(poster_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    try:
        poster = poster_service.add_comment(
            poster_id,
            text=data.get("text"),
            author=data.get("author"),
        )
        return jsonify(poster), 200
    except PosterNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except ValueError as e:
        return jsonify({"error": str(e)}), 400


@poster_bp.route("/post/<int:poster_id>", methods=["PUT"])
def update_poster(poster_id):
    fields, image = _read_poster_form()
    if fields is None:
        return jsonify({"error": "Invalid request body"}), 400

    try:
        return jsonify(poster_service.update_poster(poster_id, fields, image)), 200
    except PosterNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except MediaStorageError as e:
        return jsonify({"error": str(e)}), 500
    except ValueError as e:
        return jsonify({"error": str(e)}), 400


@poster_bp.route("/post/<int:poster_id>", methods=["DELETE"])
def delete_poster(poster_id):
    try:
        poster_service.delete_poster(poster_id)
        return jsonify({"message": "Poster deleted"}), 200
    except PosterNotFoundError as e:
        return jsonify({"error": str(e)}), 404

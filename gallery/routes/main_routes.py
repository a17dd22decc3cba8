from flask import Blueprint, current_app, render_template, send_from_directory


main_bp = Blueprint("main", __name__)


@main_bp.route("/", methods=["GET"])
def main():
    return render_template("index.html")


@main_bp.route("/uploads/<path:filename>", methods=["GET", "HEAD"])
def get_upload(filename: str):
    return send_from_directory(
        current_app.config["UPLOAD_FOLDER"],
        filename,
        max_age=0,
    )

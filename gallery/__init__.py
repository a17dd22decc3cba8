import logging

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import RequestEntityTooLarge

from gallery.config import Config
from gallery.db import db
from gallery.extensions.extensions import cors, ma
from gallery.routes.main_routes import main_bp
from gallery.routes.poster_routes import poster_bp


def _register_error_handlers(app):
    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e):
        return jsonify({"error": "Uploaded file is too large"}), 413

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(e):
        db.session.rollback()
        app.logger.exception("Poster store failure")
        return jsonify({"error": str(e)}), 500


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    db.init_app(app)
    ma.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ALLOWED_ORIGINS"])

    app.register_blueprint(main_bp)
    app.register_blueprint(poster_bp)
    _register_error_handlers(app)

    with app.app_context():
        db.create_all()

    return app

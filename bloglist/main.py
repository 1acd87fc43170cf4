"""Flask application entry point."""

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Settings
from .db import init_db
from .exceptions import BlogListError

logger = logging.getLogger(__name__)


# Error handlers
def handle_blog_list_error(error: BlogListError):
    """Render any BlogListError with the status code of its class."""
    response = {
        "error": error.message,
        "type": error.__class__.__name__
    }
    if error.details:
        response["details"] = error.details
    if error.status_code >= 500:
        logger.error(f"{error.__class__.__name__}: {error.message}")
    return jsonify(response), error.status_code


def handle_unknown_endpoint(error):
    """Unmatched routes get a fixed body."""
    return jsonify({"error": "unknown endpoint"}), 404


def handle_internal_error(error: Exception):
    """Handle everything else; HTTP errors keep their own status code."""
    if isinstance(error, HTTPException):
        return jsonify({
            "error": error.description,
            "type": error.__class__.__name__
        }), error.code

    logger.exception(f"Internal error: {error}")
    return jsonify({
        "error": "An internal error occurred",
        "type": "InternalServerError"
    }), 500


def log_request():
    logger.info(f"{request.method} {request.path}")


def create_app(settings: Settings | None = None) -> Flask:
    """
    Build the Flask application.

    Args:
        settings: Configuration resolved once at process start. Defaults to
            Settings() read from the environment and .env.

    Returns:
        Configured Flask app with the database schema applied
    """
    if settings is None:
        settings = Settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = Flask(__name__)
    app.extensions["bloglist"] = settings

    CORS(app, origins=settings.cors_origins, supports_credentials=True)

    init_db(settings.database_path)
    logger.info("Database initialized successfully")

    from .api import close_request_core
    from .api.blogs import blogs_bp
    from .auth.api import auth_bp

    app.before_request(log_request)
    app.teardown_appcontext(close_request_core)

    app.register_error_handler(BlogListError, handle_blog_list_error)
    app.register_error_handler(404, handle_unknown_endpoint)
    app.register_error_handler(Exception, handle_internal_error)

    @app.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok"})

    app.register_blueprint(blogs_bp, url_prefix=f"{settings.api_prefix}/blogs")
    app.register_blueprint(auth_bp, url_prefix=settings.api_prefix)

    return app


def main():
    """Run the development server."""
    create_app().run(debug=True)


if __name__ == "__main__":
    main()

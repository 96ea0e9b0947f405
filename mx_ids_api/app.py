from typing import Optional

from flask import Flask

from mx_ids_api.routes import api_bp
from mx_ids_api.errors import error_as_dict
from mx_ids_lib.utils.logger import prepare_logger
from mx_ids_api.constants import (
    DEFAULT_API_PREFIX,
    MAX_BATCH_SIZE,
    REST_API_LOG_FILE_NAME,
    REST_API_LOG_LEVEL,
)


def create_app(
    api_prefix: str = DEFAULT_API_PREFIX,
    max_batch_size: int = MAX_BATCH_SIZE,
    logger_level: Optional[str] = REST_API_LOG_LEVEL,
    logger_file_name: Optional[str] = REST_API_LOG_FILE_NAME,
) -> Flask:
    """
    Build the Flask application serving the validation endpoints.

    Parameters
    ----------
    api_prefix : str
        URL prefix of every endpoint (``/api`` by default).
    max_batch_size : int
        Upper bound on identifiers accepted by ``/validate/batch``.
    logger_level : Optional[str]
        Level of the ``mx_ids_api`` logger.
    logger_file_name : Optional[str]
        Optional log file; an empty value logs to stderr only.
    """
    prepare_logger(
        "mx_ids_api",
        logger_level=logger_level or "INFO",
        logger_file_name=logger_file_name or None,
    )

    app = Flask(__name__)
    app.config["MAX_BATCH_SIZE"] = max_batch_size
    app.json.ensure_ascii = False

    app.register_blueprint(api_bp, url_prefix=api_prefix.rstrip("/") or None)

    # ---- JSON error handlers ----
    @app.errorhandler(404)
    def handle_404(error):
        return error_as_dict("Resource not found"), 404

    @app.errorhandler(405)
    def handle_405(error):
        return error_as_dict("Method not allowed"), 405

    @app.errorhandler(500)
    def handle_500(error):
        return error_as_dict("Internal server error"), 500

    return app

import logging
import os

from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from backend.auth.guard import init_auth_guard
from backend.auth.verifiers import build_verifier
from backend.repositories.document_repository import DocumentRepository
from backend.routes.task_routes import create_task_service, create_tasks_blueprint
from backend.utils.db import init_app as init_db
from backend.utils.errors import ErrorKind
from backend.utils.responses import error_response, route_not_found


def create_app(config_override=None, repository=None, verifier=None):
    """Application factory.

    ``repository`` and ``verifier`` replace the MongoDB repository and the
    configured identity verifier; tests pass stand-ins here.
    """
    app = Flask(__name__)
    app.config.from_object("backend.config.Config")
    if config_override:
        app.config.update(config_override)
    app.json.sort_keys = False

    logging.basicConfig(level=app.config["LOG_LEVEL"])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Core extensions
    CORS(app, resources={r"/api/*": {"origins": app.config["FRONTEND_BASE_URL"]}})
    JWTManager(app)
    init_db(app)

    # Collaborators are built once here and shared by every request
    repository = repository or DocumentRepository()
    verifier = verifier or build_verifier(app.config)
    task_service = create_task_service(repository, app.config["TASKS_COLLECTION_PATH"])

    init_auth_guard(app, verifier)
    app.register_blueprint(create_tasks_blueprint(task_service), url_prefix="/api/tasks")

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(_):
        return route_not_found()

    @app.errorhandler(500)
    def server_error(_):
        return error_response(ErrorKind.INTERNAL.http_status)

    app.logger.info(
        "Tasks API ready (auth provider: %s, collection: %s)",
        app.config["AUTH_PROVIDER"],
        app.config["TASKS_COLLECTION_PATH"],
    )
    return app


if __name__ == "__main__":
    # Direct run support: python -m backend.app
    create_app().run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "3001")),
        debug=os.environ.get("FLASK_DEBUG", "1") == "1",
    )

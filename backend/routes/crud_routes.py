from http import HTTPStatus

from flask import Blueprint, current_app, g, jsonify, request

from backend.auth.identity import AuthenticationError
from backend.services.crud_service import CrudService
from backend.utils.errors import ErrorKind
from backend.utils.responses import error_response, success_response
from backend.validation import validate_body, validate_id_input


def _reject(outcome):
    return error_response(outcome.kind.http_status, outcome.message)


def _store_failure(result):
    return error_response(result.error.http_status, result.error.value)


def _unauthorized(exc):
    current_app.logger.info("Rejected identity for %s %s: %s", request.method, request.path, exc)
    return error_response(ErrorKind.UNAUTHORIZED.http_status)


def create_crud_blueprint(name: str, service: CrudService) -> Blueprint:
    """Build list/create/update/delete routes for the entity ``service`` manages.

    Only the create route exposes the text of unexpected errors; the other
    routes answer a bare 500 so driver details stay on the server.
    """
    bp = Blueprint(name, __name__)
    schema = service.schema

    @bp.get("")
    @bp.get("/")
    def list_entities():
        try:
            entities = service.get_all(g.identity)
        except AuthenticationError as exc:
            return _unauthorized(exc)
        except Exception:  # noqa: BLE001
            current_app.logger.exception("Error listing %s", schema.name)
            return error_response(ErrorKind.INTERNAL.http_status)
        if not entities:
            return jsonify({}), HTTPStatus.NO_CONTENT
        return success_response(entities)

    @bp.post("")
    @bp.post("/")
    def create_entity():
        payload = request.get_json(silent=True)
        outcome = validate_body(payload, schema)
        if not outcome.ok:
            return _reject(outcome)

        try:
            result = service.create(g.identity, payload)
        except AuthenticationError as exc:
            return _unauthorized(exc)
        except Exception as exc:  # noqa: BLE001
            current_app.logger.exception("Error creating %s", schema.name)
            return error_response(ErrorKind.INTERNAL.http_status, str(exc) or None)
        if not result.ok:
            return _store_failure(result)
        return success_response(result.value, HTTPStatus.CREATED)

    @bp.put("/<entity_id>")
    def update_entity(entity_id):
        outcome = validate_id_input(entity_id)
        if outcome.ok:
            payload = request.get_json(silent=True)
            outcome = validate_body(payload, schema)
        if not outcome.ok:
            return _reject(outcome)

        try:
            result = service.update(g.identity, entity_id, payload)
        except AuthenticationError as exc:
            return _unauthorized(exc)
        except Exception:  # noqa: BLE001
            current_app.logger.exception("Error updating %s %s", schema.name, entity_id)
            return error_response(ErrorKind.INTERNAL.http_status)
        if not result.ok:
            return _store_failure(result)
        return success_response(result.value)

    @bp.delete("/<entity_id>")
    def delete_entity(entity_id):
        outcome = validate_id_input(entity_id)
        if not outcome.ok:
            return _reject(outcome)

        try:
            result = service.delete(g.identity, entity_id)
        except AuthenticationError as exc:
            return _unauthorized(exc)
        except Exception:  # noqa: BLE001
            current_app.logger.exception("Error deleting %s %s", schema.name, entity_id)
            return error_response(ErrorKind.INTERNAL.http_status)
        if not result.ok:
            return _store_failure(result)
        return success_response(result.value)

    return bp

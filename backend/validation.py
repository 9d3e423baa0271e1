"""Request validation for entity payloads and path ids.

Checks run in a fixed order and stop at the first failure, so a given
malformed payload always produces the same single message.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from backend.models.schema import EntitySchema
from backend.utils.errors import ErrorKind, ErrorMessages

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationOutcome:
    kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def proceed(cls) -> "ValidationOutcome":
        return cls()

    @classmethod
    def reject(cls, kind: ErrorKind, message: str) -> "ValidationOutcome":
        return cls(kind=kind, message=message)


def fallback_message(schema: EntitySchema) -> str:
    return ErrorMessages.FALLBACK_ERROR.format(
        sample_input=json.dumps(dict(schema.sample_input), indent=2)
    )


def _trimmed(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


def _check_body(payload: Any, schema: EntitySchema) -> ValidationOutcome:
    if not isinstance(payload, dict) or not payload:
        return ValidationOutcome.reject(ErrorKind.EMPTY_BODY, ErrorMessages.EMPTY_BODY)

    for key, value in payload.items():
        if not isinstance(value, str):
            return ValidationOutcome.reject(
                ErrorKind.TYPE_MISMATCH, ErrorMessages.TYPE_MISMATCH.format(key=key)
            )

    if any(key not in schema.fields for key in payload):
        return ValidationOutcome.reject(ErrorKind.UNKNOWN_FIELDS, fallback_message(schema))

    sanitized = {name: _trimmed(payload.get(name)) for name in schema.fields}
    for rule in schema.rules:
        if not rule.check(sanitized[rule.field]):
            return ValidationOutcome.reject(rule.kind, rule.message)

    return ValidationOutcome.proceed()


def validate_body(payload: Any, schema: EntitySchema) -> ValidationOutcome:
    """Decide whether a create/update payload may proceed.

    ``payload`` is whatever the JSON decoder produced (``None`` when the body
    was missing or not JSON). The payload is never modified.
    """
    try:
        return _check_body(payload, schema)
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected failure while validating a %s payload", schema.name)
        return ValidationOutcome.reject(ErrorKind.UNKNOWN_FIELDS, fallback_message(schema))


def validate_id_input(entity_id: Optional[str]) -> ValidationOutcome:
    entity_id = _trimmed(entity_id)
    if not entity_id:
        return ValidationOutcome.reject(ErrorKind.MISSING_ID, ErrorMessages.MISSING_ID)
    return ValidationOutcome.proceed()

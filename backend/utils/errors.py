from enum import Enum
from http import HTTPStatus


class ErrorKind(str, Enum):
    """Every failure the API can report, with the HTTP status it maps to."""

    EMPTY_BODY = "EMPTY_BODY"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    UNKNOWN_FIELDS = "UNKNOWN_FIELDS"
    REQUIRED_TITLE = "REQUIRED_TITLE"
    TITLE_FORMAT = "TITLE_FORMAT"
    TITLE_LENGTH = "TITLE_LENGTH"
    STATUS_ENUM = "STATUS_ENUM"
    MISSING_ID = "MISSING_ID"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL = "INTERNAL"

    @property
    def http_status(self) -> HTTPStatus:
        return _STATUS_BY_KIND.get(self, HTTPStatus.BAD_REQUEST)


_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}


class ErrorMessages:
    # Client-facing detail strings, sent as ``extraMessage``
    EMPTY_BODY = "Empty body."
    TYPE_MISMATCH = "{key} needs to be a string."
    REQUIRED_TITLE = "Title is required."
    TITLE_FORMAT = "Title must only have letters and/or numbers."
    TITLE_LENGTH = "Title must be more than {min} and less than {max} characters long."
    STATUS_ENUM = "Status could be one of the set: [{statuses}]"
    FALLBACK_ERROR = "Body needs to be an object of the type: \n {sample_input}"
    MISSING_ID = "Missing id param."

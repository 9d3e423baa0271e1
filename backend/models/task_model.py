import re
from enum import Enum

from backend.models.schema import EntitySchema, FieldRule
from backend.utils.errors import ErrorKind, ErrorMessages


class TaskStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    @classmethod
    def values(cls):
        return [status.value for status in cls]


TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 100

# Anything but ASCII letters, digits and plain spaces
_TITLE_DISALLOWED = re.compile(r"[^a-zA-Z0-9 ]")

_STATUS_HINT = ErrorMessages.STATUS_ENUM.format(statuses=", ".join(TaskStatus.values()))

TASK_SCHEMA = EntitySchema(
    name="tasks",
    fields=("id", "description", "status", "title"),
    rules=(
        FieldRule(
            field="title",
            kind=ErrorKind.REQUIRED_TITLE,
            message=ErrorMessages.REQUIRED_TITLE,
            check=bool,
        ),
        FieldRule(
            field="title",
            kind=ErrorKind.TITLE_FORMAT,
            message=ErrorMessages.TITLE_FORMAT,
            check=lambda title: not _TITLE_DISALLOWED.search(title),
        ),
        FieldRule(
            field="title",
            kind=ErrorKind.TITLE_LENGTH,
            message=ErrorMessages.TITLE_LENGTH.format(min=TITLE_MIN_LENGTH, max=TITLE_MAX_LENGTH),
            check=lambda title: TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH,
        ),
        FieldRule(
            field="status",
            kind=ErrorKind.STATUS_ENUM,
            message=_STATUS_HINT,
            check=lambda status: status is None or status in TaskStatus.values(),
        ),
    ),
    # Assumed initial values for a new task
    defaults={"description": "", "status": TaskStatus.PENDING.value},
    sample_input={
        "id": "SOME_COOL_HASH_ID",
        "description": "This is a task description",
        "status": _STATUS_HINT,
        "title": "This is a task title",
    },
)

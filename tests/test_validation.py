import copy

import pytest

from backend.models.schema import EntitySchema, FieldRule
from backend.models.task_model import TASK_SCHEMA
from backend.utils.errors import ErrorKind
from backend.validation import validate_body, validate_id_input

EXPECTED_FALLBACK = (
    "Body needs to be an object of the type: \n {\n"
    '  "id": "SOME_COOL_HASH_ID",\n'
    '  "description": "This is a task description",\n'
    '  "status": "Status could be one of the set: [PENDING, IN_PROGRESS, COMPLETED]",\n'
    '  "title": "This is a task title"\n'
    "}"
)


def test_valid_payload_proceeds():
    outcome = validate_body({"title": "asdasd"}, TASK_SCHEMA)
    assert outcome.ok
    assert outcome.kind is None


@pytest.mark.parametrize("payload", [None, {}, [], ["title"], "a title", 42])
def test_non_object_or_empty_body(payload):
    outcome = validate_body(payload, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.EMPTY_BODY
    assert outcome.message == "Empty body."


@pytest.mark.parametrize(
    "key,value",
    [("title", 123), ("description", True), ("status", 123), ("id", {}), ("title", None), ("id", ["x"])],
)
def test_type_mismatch_names_the_key(key, value):
    payload = {"title": "Valid title", key: value}
    outcome = validate_body(payload, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.TYPE_MISMATCH
    assert outcome.message == f"{key} needs to be a string."


def test_type_mismatch_reports_first_key_in_payload_order():
    outcome = validate_body({"status": False, "title": 1}, TASK_SCHEMA)
    assert outcome.message == "status needs to be a string."


def test_type_check_runs_before_field_set_check():
    outcome = validate_body({"sthElse": 1, "title": "Valid title"}, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.TYPE_MISMATCH
    assert outcome.message == "sthElse needs to be a string."


def test_unknown_field_embeds_sample_payload():
    outcome = validate_body({"title": "Valid title", "sthElse": "true"}, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.UNKNOWN_FIELDS
    assert outcome.message == EXPECTED_FALLBACK


def test_unknown_field_wins_over_title_errors():
    outcome = validate_body({"sthElse": "true"}, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.UNKNOWN_FIELDS


@pytest.mark.parametrize("payload", [{"description": "no title"}, {"title": ""}, {"title": "    "}])
def test_title_required(payload):
    outcome = validate_body(payload, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.REQUIRED_TITLE
    assert outcome.message == "Title is required."


@pytest.mark.parametrize("title", ["%%%%%", "Hello!", "tab\there", "café time", "dash-title"])
def test_title_format(title):
    outcome = validate_body({"title": title}, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.TITLE_FORMAT
    assert outcome.message == "Title must only have letters and/or numbers."


def test_title_format_checked_before_length():
    outcome = validate_body({"title": "%"}, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.TITLE_FORMAT


@pytest.mark.parametrize("title", ["titl", "t" * 101, "title " * 16 + "title"])
def test_title_length(title):
    outcome = validate_body({"title": title}, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.TITLE_LENGTH
    assert outcome.message == "Title must be more than 5 and less than 100 characters long."


@pytest.mark.parametrize("title", ["title", "t" * 100, "  abcde  "])
def test_title_length_boundaries_pass(title):
    assert validate_body({"title": title}, TASK_SCHEMA).ok


def test_status_outside_enum():
    outcome = validate_body({"title": "Valid title", "status": "DONE"}, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.STATUS_ENUM
    assert outcome.message == "Status could be one of the set: [PENDING, IN_PROGRESS, COMPLETED]"


@pytest.mark.parametrize("status", ["PENDING", "IN_PROGRESS", " COMPLETED "])
def test_status_in_enum(status):
    assert validate_body({"title": "Valid title", "status": status}, TASK_SCHEMA).ok


def test_title_errors_reported_before_status():
    outcome = validate_body({"title": "bad!", "status": "DONE"}, TASK_SCHEMA)
    assert outcome.kind == ErrorKind.TITLE_FORMAT


def test_validation_is_pure_and_repeatable():
    payload = {"id": " abc ", "title": "  Some title  ", "description": " d ", "status": "PENDING"}
    original = copy.deepcopy(payload)

    first = validate_body(payload, TASK_SCHEMA)
    second = validate_body(payload, TASK_SCHEMA)

    assert first == second
    assert first.ok
    assert payload == original


def test_unexpected_failure_degrades_to_fallback_message():
    def explode(_value):
        raise RuntimeError("boom")

    schema = EntitySchema(
        name="tasks",
        fields=TASK_SCHEMA.fields,
        rules=(FieldRule(field="title", kind=ErrorKind.REQUIRED_TITLE, message="", check=explode),),
        sample_input=TASK_SCHEMA.sample_input,
    )
    outcome = validate_body({"title": "Valid title"}, schema)
    assert outcome.kind == ErrorKind.UNKNOWN_FIELDS
    assert outcome.message == EXPECTED_FALLBACK


@pytest.mark.parametrize("entity_id", [None, "", "   "])
def test_missing_id(entity_id):
    outcome = validate_id_input(entity_id)
    assert outcome.kind == ErrorKind.MISSING_ID
    assert outcome.message == "Missing id param."


def test_present_id_proceeds():
    assert validate_id_input(" abc ").ok


@pytest.mark.parametrize(
    "kind,status",
    [
        (ErrorKind.EMPTY_BODY, 400),
        (ErrorKind.ALREADY_EXISTS, 400),
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.UNAUTHORIZED, 401),
        (ErrorKind.INTERNAL, 500),
    ],
)
def test_error_kind_status(kind, status):
    assert kind.http_status == status

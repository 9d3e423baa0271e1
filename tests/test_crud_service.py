from unittest.mock import MagicMock

import pytest

from backend.auth.identity import AuthenticationError, Identity
from backend.repositories.document_repository import DocumentRepository, StoreResult
from backend.routes.task_routes import create_task_service

USER = Identity(uid="u1")


@pytest.fixture
def repository():
    return MagicMock(spec=DocumentRepository)


def test_global_collection(repository):
    service = create_task_service(repository)

    service.get_all(USER)

    repository.find_all.assert_called_once_with("tasks")


def test_collection_scoped_per_identity(repository):
    service = create_task_service(repository, "users/{uid}/tasks")

    service.get_by_id(USER, "t1")

    repository.find_by_id.assert_called_once_with("users/u1/tasks", "t1")


@pytest.mark.parametrize("uid", ["", "victim/", "a.b", "a$b", "a\0b"])
def test_uid_that_cannot_name_a_collection_is_rejected(repository, uid):
    service = create_task_service(repository, "users/{uid}/tasks")

    with pytest.raises(AuthenticationError):
        service.get_all(Identity(uid=uid))

    repository.find_all.assert_not_called()


def test_uid_is_not_checked_for_global_collection(repository):
    service = create_task_service(repository)

    service.get_all(Identity(uid="a.b"))

    repository.find_all.assert_called_once_with("tasks")


def test_create_fills_missing_defaults(repository):
    repository.create.return_value = StoreResult.success({})
    service = create_task_service(repository)

    service.create(USER, {"title": "asdasd"})

    repository.create.assert_called_once_with(
        "tasks", {"description": "", "status": "PENDING", "title": "asdasd"}
    )


def test_create_keeps_client_values(repository):
    service = create_task_service(repository)

    service.create(USER, {"title": "asdasd", "description": "", "status": "COMPLETED"})

    repository.create.assert_called_once_with(
        "tasks", {"description": "", "status": "COMPLETED", "title": "asdasd"}
    )


def test_update_uses_path_id(repository):
    service = create_task_service(repository)

    service.update(USER, "path-id", {"id": "body-id", "title": "asdasd"})

    repository.update_by_id.assert_called_once_with("tasks", "path-id", {"id": "path-id", "title": "asdasd"})


def test_delete_passes_result_through(repository):
    repository.delete_by_id.return_value = StoreResult.success({"id": "t1"})
    service = create_task_service(repository)

    assert service.delete(USER, "t1").value == {"id": "t1"}

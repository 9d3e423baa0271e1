from backend.models.task_model import TASK_SCHEMA
from backend.repositories.document_repository import DocumentRepository
from backend.routes.crud_routes import create_crud_blueprint
from backend.services.crud_service import CrudService


def create_task_service(repository: DocumentRepository, collection_path: str = "tasks") -> CrudService:
    return CrudService(repository, TASK_SCHEMA, collection_path)


def create_tasks_blueprint(service: CrudService):
    return create_crud_blueprint("tasks", service)

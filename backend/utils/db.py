import atexit
import threading

from flask import current_app
from pymongo import MongoClient

_EXTENSION_KEY = "mongo_client"
_client_lock = threading.Lock()


def init_app(app):
    # One pooled client per application, created on first use and closed at exit
    app.extensions.setdefault(_EXTENSION_KEY, None)
    atexit.register(close_client, app)


def get_client() -> MongoClient:
    app = current_app._get_current_object()
    client = app.extensions.get(_EXTENSION_KEY)
    if client is None:
        with _client_lock:
            client = app.extensions.get(_EXTENSION_KEY)
            if client is None:
                client = MongoClient(app.config["MONGO_URI"], serverSelectionTimeoutMS=2000)
                app.extensions[_EXTENSION_KEY] = client
                app.logger.info("MongoDB client created for database %s", app.config["MONGO_DB_NAME"])
    return client


def close_client(app):
    with _client_lock:
        client = app.extensions.get(_EXTENSION_KEY)
        app.extensions[_EXTENSION_KEY] = None
    if client is not None:
        client.close()


def get_db():
    return get_client()[current_app.config["MONGO_DB_NAME"]]


def collection_name(collection_path: str) -> str:
    """Map a slash separated collection path (``users/<uid>/tasks``) to a
    MongoDB collection name (``users.<uid>.tasks``)."""
    return ".".join(part for part in collection_path.strip("/").split("/") if part)


def serialize_doc(doc):
    if doc is None:
        return None
    data = {"id": str(doc["_id"])}
    data.update({key: value for key, value in doc.items() if key != "_id"})
    return data

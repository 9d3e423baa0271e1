import os

from dotenv import load_dotenv

ENV = os.environ.get("FLASK_ENV", "development")

# Per-environment file first (.development.env, .production.env), then .env
load_dotenv(f".{ENV}.env")
load_dotenv()


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "change-this-jwt-secret")

    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/?directConnection=true")
    MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "tasks_api")
    # Use "users/{uid}/tasks" to give every caller their own collection
    TASKS_COLLECTION_PATH = os.environ.get("TASKS_COLLECTION_PATH", "tasks")

    FRONTEND_BASE_URL = os.environ.get("FRONTEND_BASE_URL", "*")

    AUTH_PROVIDER = os.environ.get("AUTH_PROVIDER", "jwt")  # jwt | userinfo
    IDENTITY_USERINFO_URL = os.environ.get("IDENTITY_USERINFO_URL")
    IDENTITY_TIMEOUT_SECONDS = float(os.environ.get("IDENTITY_TIMEOUT_SECONDS", "10"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    ENV = ENV
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"

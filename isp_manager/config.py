import os
from datetime import timedelta


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "DEV")
    DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"
    TESTING = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SERVER_PORT = int(os.getenv("SERVER_PORT", "2022"))

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URI",
        "postgresql://postgres:postgres@db:5432/isp_db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,   # test connection before use
        "pool_recycle": 1800,    # recycle every 30min
        "pool_size": 5,
        "max_overflow": 10
    }

    # JWT (caller identity for the role guard)
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me-change-me-change-me-1234")
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_NAME = "Authorization"
    JWT_HEADER_TYPE = "Bearer"
    JWT_ALGORITHM = "HS256"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=8)

    # bcrypt cost factor for member passwords
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-0123"
    BCRYPT_ROUNDS = 4

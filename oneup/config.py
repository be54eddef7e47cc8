"""应用配置。
可通过环境变量覆盖，默认使用 SQLite 本地文件。
"""
from __future__ import annotations
import os
from pathlib import Path


class Config:
    BASE_DIR: Path = Path(__file__).resolve().parent.parent  # 项目根目录
    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret")
    DATA_DIR: str = os.environ.get("DATA_DIR", str((BASE_DIR / "data").resolve()))
    # 绝对路径 SQLite，注意 Windows 需使用正斜杠
    _default_db_path = str((Path(DATA_DIR) / "oneup.sqlite").resolve()).replace("\\", "/")
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("DATABASE_URL", f"sqlite:///{_default_db_path}")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Logging
    LOG_DIR: str = os.environ.get("LOG_DIR", str((BASE_DIR / "logs").resolve()))
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = os.environ.get("LOG_TO_FILE", "true").lower() == "true"

    # Swagger
    SWAGGER = {
        "title": "OneUp Medical Equipment API",
        "uiversion": 3,
        "openapi": "3.0.2",
    }


class TestingConfig(Config):
    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = "sqlite://"
    LOG_TO_FILE: bool = False
    LOG_LEVEL: str = "WARNING"

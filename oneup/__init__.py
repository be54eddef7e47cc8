"""app 工厂与初始化逻辑。
注册扩展、日志、错误处理与蓝图。
"""
from __future__ import annotations
import os
import time
from typing import Optional
from flask import Flask, g, request
from .config import Config
from .extensions import db, migrate, swagger
from .exceptions import register_error_handlers
from .utils.logging_utils import performance_logger, setup_logging


def create_app(config: Optional[object] = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # 基础配置
    app.config.from_object(config or Config())
    app.json.sort_keys = False

    setup_logging(
        level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        log_to_file=app.config.get("LOG_TO_FILE", True),
    )

    # 初始化扩展
    db.init_app(app)
    migrate.init_app(app, db)
    swagger.init_app(app)

    # 确保本地目录存在（使用绝对路径）
    data_dir = app.config.get("DATA_DIR")
    if data_dir and app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite:///"):
        os.makedirs(data_dir, exist_ok=True)

    # 数据库自动初始化（SQLite 开发库）
    from . import models  # noqa: F401
    with app.app_context():
        db.create_all()

    register_error_handlers(app)

    # 请求耗时记录
    @app.before_request
    def _start_timer():
        g.request_start = time.perf_counter()

    @app.after_request
    def _log_timing(response):
        start = g.get("request_start")
        if start is not None:
            duration_ms = (time.perf_counter() - start) * 1000
            performance_logger.log_request_timing(request.path, request.method, duration_ms, response.status_code)
        return response

    # 注册蓝图
    from .blueprints import api_docs, devices, health, payment_methods
    app.register_blueprint(devices.bp)
    app.register_blueprint(payment_methods.bp)
    app.register_blueprint(health.bp)
    app.register_blueprint(api_docs.bp)

    return app

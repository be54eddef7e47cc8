"""Flask 扩展集中初始化。"""

from __future__ import annotations

from flasgger import Swagger
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

# 全局扩展实例

db: SQLAlchemy = SQLAlchemy()
migrate: Migrate = Migrate()
swagger: Swagger = Swagger()

"""
manage.py - 应用入口与开发运行脚本。
可通过 `python manage.py` 启动；数据库迁移使用 `flask --app manage db ...`。
"""
from __future__ import annotations
import os
from flask import Flask
from oneup import create_app

app: Flask = create_app()

if __name__ == "__main__":
    # 允许从环境覆盖端口
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("FLASK_ENV") == "development"
    app.run(host="0.0.0.0", port=port, debug=debug)

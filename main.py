#!/usr/bin/env python3
"""
Folder Viewer - Browse folders and read PDFs under a fixed root
===============================================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask, jsonify, render_template, request

import config
from api import api_bp
from ui import ui_bp

logger = logging.getLogger(__name__)


def create_app(root_dir: str | Path | None = None) -> Flask:
    """Flask application factory.

    `root_dir` overrides config.ROOT_DIR; every service reads the root
    from app.config["ROOT_DIR"].
    """

    app = Flask(
        __name__,
        template_folder=str(config.BASE_DIR / "templates"),
        static_folder=str(config.BASE_DIR / "static"),
    )
    app.config["ROOT_DIR"] = Path(root_dir or config.ROOT_DIR).resolve()

    if not app.config["ROOT_DIR"].is_dir():
        logger.warning(f"Root directory does not exist: {app.config['ROOT_DIR']}")

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)
    app.register_blueprint(ui_bp)

    # ── Error handlers ──────────────────────────────────────────────
    @app.errorhandler(404)
    def _404(e):
        if request.path.startswith("/api/"):
            return jsonify({"success": False, "error": "not found",
                            "code": "NOT_FOUND"}), 404
        return render_template("error.html", code=404,
                               message="Không tìm thấy trang"), 404

    @app.errorhandler(500)
    def _500(e):
        return render_template("error.html", code=500,
                               message="Lỗi máy chủ"), 500

    return app


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    print("=" * 56)
    print("  Folder Viewer")
    print("=" * 56)

    app = create_app()

    print(f"\n  http://{config.HOST}:{config.PORT}")
    print(f"  Root: {app.config['ROOT_DIR']}")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()

"""
ui.file_server - Stream PDFs found under the root.

Only .pdf files under ROOT_DIR are served.  Path-traversal (../) is
blocked by resolving to an absolute path and checking it is still
inside the root.  Errors are plain text.
"""

import logging

from flask import current_app, send_file

from ui import ui_bp
from services.errors import FileReadError, FolderViewError
from services.file_gateway import FileGateway

logger = logging.getLogger(__name__)


@ui_bp.route("/file/<path:relpath>")
def serve_file(relpath: str):
    gateway = FileGateway(current_app.config["ROOT_DIR"])
    try:
        path = gateway.resolve(relpath)
        response = send_file(path, mimetype="application/pdf",
                             download_name=path.name)
    except FolderViewError as exc:
        return _plain(exc)
    except OSError as exc:
        logger.error(f"Error reading {relpath}: {exc}")
        return _plain(FileReadError(relpath, cause=exc))

    # send_file only quotes names that need it; keep filename="..." for ASCII
    # names.  Non-ASCII names keep send_file's filename* form.
    if path.name.isascii() and '"' not in path.name and "\\" not in path.name:
        response.headers["Content-Disposition"] = f'inline; filename="{path.name}"'
    return response


def _plain(exc: FolderViewError):
    return exc.api_message, exc.status, {"Content-Type": "text/plain; charset=utf-8"}

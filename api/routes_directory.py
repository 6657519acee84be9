"""
api.routes_directory - /api/directory endpoint.
"""

from flask import current_app, jsonify, request

from api import api_bp
from services.browser import FolderBrowser
from services.errors import MissingFolderParam

EMPTY_WARNING = "Thư mục rỗng hoặc không có quyền truy cập nội dung"


@api_bp.route("/directory")
def get_directory():
    """
    GET /api/directory?folder=<name>

    Locate the folder under the root and return its tree as JSON.
    """
    folder = request.args.get("folder", "").strip()
    if not folder:
        raise MissingFolderParam()

    result = FolderBrowser(current_app.config["ROOT_DIR"]).browse(folder)

    body = {
        "success": True,
        "data": result.node.to_dict(),
        "path": result.relative_path,
    }
    if result.is_empty:
        body["warning"] = EMPTY_WARNING
    return jsonify(body)

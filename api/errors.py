"""
api.errors - JSON error handlers for the API blueprint.
"""

import logging

from flask import jsonify

from api import api_bp
from services.errors import FolderViewError

logger = logging.getLogger(__name__)


@api_bp.errorhandler(FolderViewError)
def api_folder_error(e: FolderViewError):
    if e.status >= 500:
        logger.error(f"API error {e.code} for {e.folder_name!r}: {e.cause or e}")
    return jsonify(e.to_dict()), e.status


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"success": False, "error": "internal server error",
                    "code": "UNKNOWN_ERROR"}), 500

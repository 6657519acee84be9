"""
ui.routes_browse - Folder search page.

Always answers 200; problems are shown inline on the page.
"""

from flask import current_app, request, render_template

from ui import ui_bp
from services.browser import FolderBrowser
from services.errors import FolderViewError
import config

EMPTY_MESSAGE = ('Thư mục "{folder}" tồn tại nhưng không có nội dung '
                 "hoặc bạn không có quyền truy cập.")


@ui_bp.route("/")
def index():
    folder = request.args.get("folder", "").strip()
    root = current_app.config["ROOT_DIR"]

    structure = None
    search_path = None
    error = None

    if folder:
        try:
            result = FolderBrowser(root).browse(folder)
            search_path = result.relative_path
            if result.is_empty:
                error = EMPTY_MESSAGE.format(folder=folder)
            else:
                structure = result.node
        except FolderViewError as exc:
            error = exc.page_message

    return render_template(
        "index.html",
        title=config.PAGE_TITLE,
        base_dir=root,
        folder_name=folder,
        search_path=search_path,
        structure=structure,
        error=error,
    )

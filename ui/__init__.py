"""
ui - Server-rendered HTML layer and PDF streaming.

All route modules register on a single Flask Blueprint.
"""

from flask import Blueprint

ui_bp = Blueprint("ui", __name__)

# Import route modules so their @ui_bp decorators execute
from ui import routes_browse      # noqa: F401, E402
from ui import file_server        # noqa: F401, E402

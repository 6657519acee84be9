"""
services - Filesystem logic sitting between the routes and the disk.
"""

from services.browser import FolderBrowser, BrowseResult            # noqa: F401
from services.directory_node import DirectoryNode                   # noqa: F401
from services.directory_scanner import DirectoryScanner             # noqa: F401
from services.file_gateway import FileGateway                       # noqa: F401
from services.folder_locator import FolderLocator                   # noqa: F401
from services.folder_name import is_valid_folder_name               # noqa: F401

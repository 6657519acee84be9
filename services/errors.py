"""
services.errors - Error taxonomy shared by the UI, API and file routes.

Every error carries a machine code, an HTTP status and two Vietnamese
messages: a short one for JSON / plain-text bodies and a longer one for
the rendered page.  Messages may reference {folder}.
"""

from __future__ import annotations

import errno


class FolderViewError(Exception):
    code = "UNKNOWN_ERROR"
    status = 500
    api_template = "Lỗi không xác định khi đọc thư mục"
    page_template = "Lỗi không xác định khi tìm kiếm thư mục."

    def __init__(self, folder_name: str = "", cause: Exception | None = None):
        self.folder_name = folder_name
        self.cause = cause
        super().__init__(self.api_message)

    @property
    def api_message(self) -> str:
        return self.api_template.format(folder=self.folder_name)

    @property
    def page_message(self) -> str:
        return self.page_template.format(folder=self.folder_name)

    def to_dict(self) -> dict:
        return {
            "success": False,
            "error": self.api_message,
            "code": self.code,
            "folderName": self.folder_name,
        }


# ── Request input ──────────────────────────────────────────────────────

class MissingFolderParam(FolderViewError):
    code = "MISSING_FOLDER_PARAM"
    status = 400
    api_template = "Vui lòng cung cấp tên folder"
    page_template = "Vui lòng nhập tên thư mục cần tìm."


class InvalidFolderName(FolderViewError):
    code = "INVALID_FOLDER_NAME"
    status = 400
    api_template = "Tên thư mục không hợp lệ"
    page_template = ("Tên thư mục không hợp lệ. Vui lòng không sử dụng ký tự "
                     "đặc biệt và giới hạn dưới 50 ký tự.")


# ── Folder lookup ──────────────────────────────────────────────────────

class FolderNotFound(FolderViewError):
    code = "FOLDER_NOT_FOUND"
    status = 404
    api_template = 'Không tìm thấy folder "{folder}"'
    page_template = ('Không tìm thấy folder "{folder}" trong thư mục gốc. '
                     "Vui lòng kiểm tra lại tên thư mục.")


class AccessDenied(FolderViewError):
    code = "ACCESS_DENIED"
    status = 403
    api_template = "Không có quyền truy cập vào thư mục"
    page_template = "Không có quyền truy cập vào thư mục này."


class ReadAccessDenied(AccessDenied):
    """EACCES/EPERM from a filesystem call, answered as an I/O error."""
    status = 500


class PathNotFound(FolderViewError):
    code = "PATH_NOT_FOUND"
    status = 500
    api_template = "Đường dẫn không tồn tại"
    page_template = "Thư mục không tồn tại hoặc đã bị xóa."


class SystemOverload(FolderViewError):
    code = "SYSTEM_OVERLOAD"
    status = 500
    api_template = "Hệ thống quá tải"
    page_template = "Hệ thống đang quá tải. Vui lòng thử lại sau."


# ── File streaming ─────────────────────────────────────────────────────

class FileNotFound(FolderViewError):
    code = "FILE_NOT_FOUND"
    status = 404
    api_template = "Không tìm thấy file"


class NotAFile(FolderViewError):
    code = "NOT_A_FILE"
    status = 400
    api_template = "Đường dẫn không phải là file"


class WrongFileType(FolderViewError):
    code = "WRONG_FILE_TYPE"
    status = 403
    api_template = "Chỉ hỗ trợ file PDF"


class PathOutsideRoot(FolderViewError):
    code = "PATH_OUTSIDE_ROOT"
    status = 403
    api_template = "Đường dẫn nằm ngoài thư mục gốc"


class FileReadError(FolderViewError):
    code = "FILE_READ_ERROR"
    status = 500
    api_template = "Lỗi khi đọc file"


_ERRNO_MAP = {
    errno.EACCES: ReadAccessDenied,
    errno.EPERM:  ReadAccessDenied,
    errno.ENOENT: PathNotFound,
    errno.EMFILE: SystemOverload,
    errno.ENFILE: SystemOverload,
}


def from_os_error(exc: OSError, folder_name: str = "") -> FolderViewError:
    """Map a filesystem error onto the taxonomy (UNKNOWN_ERROR if unmapped)."""
    cls = _ERRNO_MAP.get(exc.errno, FolderViewError)
    return cls(folder_name, cause=exc)

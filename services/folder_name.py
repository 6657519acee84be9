"""
services.folder_name - Folder-name validation.

A name is rejected when it is longer than MAX_FOLDER_NAME_LENGTH or
contains a character that is illegal in a path segment.
"""

import re

import config

INVALID_CHARS = re.compile(r'[<>:"/\\|?*]')


def is_valid_folder_name(name: str) -> bool:
    """True unless `name` is too long or contains <>:"/\\|?*.

    The empty string is valid; callers decide whether it means
    "no search" or "missing parameter".
    """
    if len(name) > config.MAX_FOLDER_NAME_LENGTH:
        return False
    return INVALID_CHARS.search(name) is None

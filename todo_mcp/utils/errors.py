"""
Todo service errors

Every failure the store signals (other than plain absence, which is
returned as None/False) is a TodoServiceError carrying a stable code that
the MCP layer forwards to clients.
"""

from typing import Any, Dict, Optional


class TodoServiceError(Exception):
    """Base exception for todo store failures"""

    code = "TODO_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DuplicateTodoError(TodoServiceError):
    """Raised when a todo with the same title and description already exists"""

    code = "DUPLICATE_TODO"

    def __init__(self, existing_id: str):
        self.existing_id = existing_id
        super().__init__(
            f"A todo with the same title and description already exists (ID: {existing_id})",
            details={"existing_id": existing_id},
        )


class FolderNotFoundError(TodoServiceError):
    code = "NOT_FOUND"

    def __init__(self, folder_path: str):
        super().__init__(f"Folder does not exist: {folder_path}", details={"folder_path": folder_path})


class NotADirectoryPathError(TodoServiceError):
    code = "NOT_A_DIRECTORY"

    def __init__(self, folder_path: str):
        super().__init__(f"Path is not a directory: {folder_path}", details={"folder_path": folder_path})


class TemplateFileError(TodoServiceError):
    """Raised when the bulk-add template cannot be resolved"""

    code = "TEMPLATE_ERROR"


class DirectoryReadError(TodoServiceError):
    code = "READ_ERROR"

    def __init__(self, dir_path: str, reason: str):
        super().__init__(
            f"Failed to read directory {dir_path}: {reason}",
            details={"directory": dir_path},
        )


class EmptyFolderError(TodoServiceError):
    code = "EMPTY_FOLDER"

    def __init__(self, folder_path: str):
        super().__init__(f"No files found in directory: {folder_path}", details={"folder_path": folder_path})


class AllDuplicatesError(TodoServiceError):
    """Raised when every file in a bulk-add folder already has a todo"""

    code = "ALL_DUPLICATES"

    def __init__(self, duplicate_count: int):
        self.duplicate_count = duplicate_count
        super().__init__(
            f"No valid files to process. {duplicate_count} files already have tasks.",
            details={"duplicate_count": duplicate_count},
        )

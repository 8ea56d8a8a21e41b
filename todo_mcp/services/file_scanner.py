"""Filesystem helpers for bulk todo creation.

Directory walk policy: depth is not bounded, entries are visited in name
order, symlinks to files are included under the link's own path and
symlinked directories are never descended (so link cycles cannot loop).
"""
import os
from typing import List, Optional

from todo_mcp.utils.errors import (
    DirectoryReadError,
    EmptyFolderError,
    FolderNotFoundError,
    NotADirectoryPathError,
    TemplateFileError,
)


def validate_folder(folder_path: str) -> str:
    """Check that folder_path is an existing directory and return its absolute path."""
    if not os.path.exists(folder_path):
        raise FolderNotFoundError(folder_path)

    if not os.path.isdir(folder_path):
        raise NotADirectoryPathError(folder_path)

    return os.path.abspath(folder_path)


def resolve_template(template: Optional[str] = None, template_file_path: Optional[str] = None) -> str:
    """
    Resolve the template text for a bulk add.

    A template file wins over inline text; it must exist, be a regular
    file, be readable and contain more than whitespace.

    Raises:
        TemplateFileError: If the template cannot be resolved
    """
    if template_file_path:
        if not os.path.exists(template_file_path):
            raise TemplateFileError(
                f"Template file does not exist: {template_file_path}",
                details={"template_file_path": template_file_path},
            )

        if not os.path.isfile(template_file_path):
            raise TemplateFileError(
                f"Template path is not a file: {template_file_path}",
                details={"template_file_path": template_file_path},
            )

        try:
            with open(template_file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateFileError(
                f"Failed to read template file {template_file_path}: {e}",
                details={"template_file_path": template_file_path},
            ) from e

        if not content.strip():
            raise TemplateFileError(
                f"Template file is empty: {template_file_path}",
                details={"template_file_path": template_file_path},
            )

        return content

    if template:
        return template

    raise TemplateFileError("Either template or templateFilePath must be provided")


def collect_files(dir_path: str) -> List[str]:
    """
    Recursively list every regular file below dir_path.

    Raises:
        DirectoryReadError: If any directory cannot be listed
    """
    files: List[str] = []

    try:
        with os.scandir(dir_path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise DirectoryReadError(dir_path, e.strerror or str(e)) from e

    for entry in entries:
        full_path = os.path.join(dir_path, entry.name)

        if entry.is_dir(follow_symlinks=False):
            files.extend(collect_files(full_path))
        elif entry.is_file():
            files.append(full_path)

    return files


def scan_folder(folder_path: str) -> List[str]:
    """Collect the files of a validated folder, failing when there are none."""
    files = collect_files(folder_path)
    if not files:
        raise EmptyFolderError(folder_path)
    return files

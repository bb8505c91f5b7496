"""Workspace-relative, forward-slash paths for generated documents.

Generated documents are persisted as text, so paths under the workspace root
are written with the ``${workspaceFolder}`` placeholder instead of the
absolute location on the current machine.
"""

from __future__ import annotations

import ntpath
import posixpath
import re
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from devassets.assets.model import WORKSPACE_FOLDER_TOKEN, ProjectDescriptor

_WINDOWS_PATH_RE = re.compile(r"^(?:[A-Za-z]:[\\/]|\\\\)")


def _is_windows_path(path: str) -> bool:
    return bool(_WINDOWS_PATH_RE.match(path)) or ("\\" in path and "/" not in path)


def _pure(path: str, *, windows: bool) -> PurePath:
    if windows:
        return PureWindowsPath(ntpath.normpath(path))
    return PurePosixPath(posixpath.normpath(path))


def path_segments(path: str, workspace_root: str) -> list[str]:
    """Split ``path`` into forward-slash segments.

    The first segment is the workspace placeholder when ``path`` lies under
    ``workspace_root``; otherwise the absolute path is split as-is.
    """
    windows = _is_windows_path(path) or _is_windows_path(workspace_root)
    candidate = _pure(path, windows=windows)
    root = _pure(workspace_root, windows=windows)
    if not candidate.is_absolute():
        candidate = root / candidate
    if candidate == root:
        return [WORKSPACE_FOLDER_TOKEN]
    if candidate.is_relative_to(root):
        return [WORKSPACE_FOLDER_TOKEN, *candidate.relative_to(root).parts]
    return candidate.as_posix().split("/")


def workspace_path(path: str, workspace_root: str) -> str:
    return "/".join(path_segments(path, workspace_root))


def parent_directory(path: str) -> str:
    if _is_windows_path(path):
        return ntpath.dirname(path)
    return posixpath.dirname(path)


def project_directory(project: ProjectDescriptor) -> str:
    return parent_directory(project.path)


def join_path(base: str, *parts: str) -> str:
    """Join filesystem path parts using the flavour of ``base``."""
    if _is_windows_path(base):
        return ntpath.join(base, *parts)
    return posixpath.join(base, *parts)


def is_absolute(path: str) -> bool:
    if _is_windows_path(path):
        return ntpath.isabs(path)
    return posixpath.isabs(path)

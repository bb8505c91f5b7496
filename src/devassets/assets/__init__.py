"""Editor build-task and launch configuration generation."""

from devassets.assets.adapter import adapt_workspace_information, default_output_path
from devassets.assets.frameworks import describe, framework_version, normalize_short_name
from devassets.assets.generator import AssetGenerator
from devassets.assets.model import (
    WORKSPACE_FOLDER_TOKEN,
    ProgramLaunchType,
    ProjectDescriptor,
    TargetFramework,
    TaskDocument,
    TaskEntry,
    WorkspaceFolder,
    WorkspaceInfo,
)
from devassets.assets.paths import path_segments, workspace_path

__all__ = [
    "AssetGenerator",
    "ProgramLaunchType",
    "ProjectDescriptor",
    "TargetFramework",
    "TaskDocument",
    "TaskEntry",
    "WORKSPACE_FOLDER_TOKEN",
    "WorkspaceFolder",
    "WorkspaceInfo",
    "adapt_workspace_information",
    "default_output_path",
    "describe",
    "framework_version",
    "normalize_short_name",
    "path_segments",
    "workspace_path",
]

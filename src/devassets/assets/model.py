from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TypeAlias
from urllib.parse import unquote, urlparse

from devassets.json_types import JSONObject

WORKSPACE_FOLDER_TOKEN = "${workspaceFolder}"
BLAZOR_DEBUG_TYPE = "blazorwasm"
CORECLR_DEBUG_TYPE = "coreclr"
BUILD_TASK_LABEL = "build"
GENERATE_FULL_PATHS_FLAG = "/property:GenerateFullPaths=true"
NO_SUMMARY_FLAG = "/consoleloggerparameters:NoSummary"


class ProgramLaunchType(StrEnum):
    CONSOLE = "console"
    WEB = "web"
    BLAZOR_WEBASSEMBLY_STANDALONE = "blazorwasm-standalone"
    BLAZOR_WEBASSEMBLY_HOSTED = "blazorwasm-hosted"


@dataclass(frozen=True)
class TargetFramework:
    short_name: str
    name: str = ""
    friendly_name: str = ""


@dataclass(frozen=True)
class ProjectDescriptor:
    path: str
    assembly_name: str
    target_frameworks: tuple[TargetFramework, ...]
    output_path: str = ""
    source_files: tuple[str, ...] = ()
    is_executable: bool = True
    is_web_project: bool = False
    is_blazor_standalone: bool = False
    is_blazor_hosted: bool = False
    is_unity_project: bool = False
    framework_index: int = 0

    @property
    def selected_framework(self) -> TargetFramework | None:
        if not self.target_frameworks:
            return None
        if 0 <= self.framework_index < len(self.target_frameworks):
            return self.target_frameworks[self.framework_index]
        return self.target_frameworks[0]


@dataclass(frozen=True)
class WorkspaceInfo:
    projects: tuple[ProjectDescriptor, ...]
    solution_path: str | None = None

    @property
    def source_file_count(self) -> int:
        return sum(len(project.source_files) for project in self.projects)


@dataclass(frozen=True)
class WorkspaceFolder:
    uri: str
    name: str | None = None
    index: int | None = None

    @classmethod
    def from_path(cls, path: str | Path, *, name: str | None = None) -> "WorkspaceFolder":
        return cls(uri=Path(path).absolute().as_uri(), name=name)

    @property
    def root_path(self) -> str:
        parsed = urlparse(self.uri)
        if parsed.scheme != "file":
            return self.uri
        path = unquote(parsed.path)
        # file:///c:/work -> c:/work
        if len(path) > 2 and path[0] == "/" and path[2] == ":":
            return path[1:]
        return path


@dataclass(frozen=True)
class TaskEntry:
    label: str
    args: tuple[str, ...]
    command: str = "dotnet"
    type: str = "process"
    problem_matcher: str = "$msCompile"

    def to_json(self) -> JSONObject:
        return {
            "label": self.label,
            "command": self.command,
            "type": self.type,
            "args": list(self.args),
            "problemMatcher": self.problem_matcher,
        }


@dataclass(frozen=True)
class TaskDocument:
    tasks: tuple[TaskEntry, ...]
    version: str = "2.0.0"

    def to_json(self) -> JSONObject:
        return {
            "version": self.version,
            "tasks": [task.to_json() for task in self.tasks],
        }


@dataclass(frozen=True)
class ConsoleLaunchConfiguration:
    program: str
    cwd: str
    name: str = ".NET Core Launch (console)"
    pre_launch_task: str = BUILD_TASK_LABEL
    args: tuple[str, ...] = ()
    console: str = "internalConsole"
    stop_at_entry: bool = False
    kind: ProgramLaunchType = field(default=ProgramLaunchType.CONSOLE, init=False)

    def to_json(self) -> JSONObject:
        return {
            "name": self.name,
            "type": CORECLR_DEBUG_TYPE,
            "request": "launch",
            "preLaunchTask": self.pre_launch_task,
            "program": self.program,
            "args": list(self.args),
            "cwd": self.cwd,
            "console": self.console,
            "stopAtEntry": self.stop_at_entry,
        }


@dataclass(frozen=True)
class WebLaunchConfiguration:
    program: str
    cwd: str
    name: str = ".NET Core Launch (web)"
    pre_launch_task: str = BUILD_TASK_LABEL
    args: tuple[str, ...] = ()
    stop_at_entry: bool = False
    server_ready_pattern: str = "\\bNow listening on:\\s+(https?://\\S+)"
    environment: tuple[tuple[str, str], ...] = (("ASPNETCORE_ENVIRONMENT", "Development"),)
    kind: ProgramLaunchType = field(default=ProgramLaunchType.WEB, init=False)

    def to_json(self) -> JSONObject:
        return {
            "name": self.name,
            "type": CORECLR_DEBUG_TYPE,
            "request": "launch",
            "preLaunchTask": self.pre_launch_task,
            "program": self.program,
            "args": list(self.args),
            "cwd": self.cwd,
            "stopAtEntry": self.stop_at_entry,
            "serverReadyAction": {
                "action": "openExternally",
                "pattern": self.server_ready_pattern,
            },
            "env": {key: value for key, value in self.environment},
            "sourceFileMap": {"/Views": f"{self.cwd}/Views"},
        }


@dataclass(frozen=True)
class BlazorStandaloneLaunchConfiguration:
    cwd: str
    name: str = "Launch and Debug Standalone Blazor WebAssembly App"
    kind: ProgramLaunchType = field(
        default=ProgramLaunchType.BLAZOR_WEBASSEMBLY_STANDALONE, init=False
    )

    def to_json(self) -> JSONObject:
        return {
            "name": self.name,
            "type": BLAZOR_DEBUG_TYPE,
            "request": "launch",
            "cwd": self.cwd,
        }


@dataclass(frozen=True)
class BlazorHostedLaunchConfiguration:
    program: str
    cwd: str
    name: str = "Launch and Debug Hosted Blazor WebAssembly App"
    kind: ProgramLaunchType = field(
        default=ProgramLaunchType.BLAZOR_WEBASSEMBLY_HOSTED, init=False
    )

    def to_json(self) -> JSONObject:
        return {
            "name": self.name,
            "type": BLAZOR_DEBUG_TYPE,
            "request": "launch",
            "hosted": True,
            "program": self.program,
            "cwd": self.cwd,
        }


@dataclass(frozen=True)
class AttachConfiguration:
    name: str = ".NET Core Attach"
    kind: None = field(default=None, init=False)

    def to_json(self) -> JSONObject:
        return {
            "name": self.name,
            "type": CORECLR_DEBUG_TYPE,
            "request": "attach",
        }


LaunchConfiguration: TypeAlias = (
    ConsoleLaunchConfiguration
    | WebLaunchConfiguration
    | BlazorStandaloneLaunchConfiguration
    | BlazorHostedLaunchConfiguration
    | AttachConfiguration
)

"""Build-task and launch configuration generation.

The generator is a pure transformation of a :class:`WorkspaceInfo`; the only
state it keeps is the selected startup project.
"""

from __future__ import annotations

from typing import Mapping

from devassets.assets.adapter import adapt_workspace_information
from devassets.assets.model import (
    BUILD_TASK_LABEL,
    GENERATE_FULL_PATHS_FLAG,
    NO_SUMMARY_FLAG,
    AttachConfiguration,
    BlazorHostedLaunchConfiguration,
    BlazorStandaloneLaunchConfiguration,
    ConsoleLaunchConfiguration,
    LaunchConfiguration,
    ProgramLaunchType,
    ProjectDescriptor,
    TaskDocument,
    TaskEntry,
    WebLaunchConfiguration,
    WorkspaceFolder,
    WorkspaceInfo,
)
from devassets.assets.paths import project_directory, workspace_path
from devassets.config import DEFAULT_BUILD_CONFIGURATION
from devassets.exceptions import ConfigurationUnavailable, InvalidSelection
from devassets.json_types import JSONObject
from devassets.logging import get_logger
from devassets.runtime.json_io import dump_json_pretty
from devassets.schema import WorkspaceInformationResponse

logger = get_logger("assets.generator")

LAUNCH_DOCUMENT_VERSION = "0.2.0"

_BUILD_FLAGS = (GENERATE_FULL_PATHS_FLAG, NO_SUMMARY_FLAG)


class AssetGenerator:
    def __init__(self, workspace_info: WorkspaceInfo, workspace_folder: WorkspaceFolder):
        self.workspace_info = workspace_info
        self.workspace_folder = workspace_folder
        self._startup_index: int | None = None

    @classmethod
    def from_workspace_information(
        cls,
        response: WorkspaceInformationResponse | Mapping[str, object],
        workspace_folder: WorkspaceFolder,
        *,
        preferred_framework: str | None = None,
        configuration: str = DEFAULT_BUILD_CONFIGURATION,
    ) -> "AssetGenerator":
        info = adapt_workspace_information(
            response,
            workspace_folder.root_path,
            preferred_framework=preferred_framework,
            configuration=configuration,
        )
        return cls(info, workspace_folder)

    @property
    def workspace_root(self) -> str:
        return self.workspace_folder.root_path

    def set_startup_project(self, index: int) -> None:
        count = len(self.workspace_info.projects)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < count:
            raise InvalidSelection(
                f"startup project index {index!r} is out of range for {count} project(s)",
                index=index if isinstance(index, int) else None,
                count=count,
            )
        self._startup_index = index
        logger.debug(
            "startup project set to %s", self.workspace_info.projects[index].path
        )

    def is_startup_project_selected(self) -> bool:
        return self._startup_index is not None

    @property
    def startup_project(self) -> ProjectDescriptor:
        if self._startup_index is None:
            raise InvalidSelection(
                "startup project must be selected before generating assets",
                count=len(self.workspace_info.projects),
            )
        return self.workspace_info.projects[self._startup_index]

    def executable_projects(self) -> list[ProjectDescriptor]:
        return [
            project
            for project in self.workspace_info.projects
            if (project.is_executable or project.is_blazor_standalone)
            and not project.is_unity_project
        ]

    def has_executable_projects(self) -> bool:
        return bool(self.executable_projects())

    def compute_program_launch_type(self) -> ProgramLaunchType:
        project = self.startup_project
        if project.is_blazor_standalone:
            return ProgramLaunchType.BLAZOR_WEBASSEMBLY_STANDALONE
        if project.is_blazor_hosted:
            return ProgramLaunchType.BLAZOR_WEBASSEMBLY_HOSTED
        if project.is_web_project:
            return ProgramLaunchType.WEB
        return ProgramLaunchType.CONSOLE

    # Path helpers shared by every document.

    def _project_file_path(self, project: ProjectDescriptor) -> str:
        return workspace_path(project.path, self.workspace_root)

    def _project_cwd(self, project: ProjectDescriptor) -> str:
        return workspace_path(project_directory(project), self.workspace_root)

    def _program_path(self, project: ProjectDescriptor) -> str:
        if not project.output_path:
            raise ConfigurationUnavailable(
                f"no target framework or output path reported for {project.path}"
            )
        return workspace_path(project.output_path, self.workspace_root)

    # tasks.json

    def create_tasks_configuration(self) -> TaskDocument:
        project_file = self._project_file_path(self.startup_project)
        tasks = (
            TaskEntry(label=BUILD_TASK_LABEL, args=("build", project_file, *_BUILD_FLAGS)),
            TaskEntry(label="publish", args=("publish", project_file, *_BUILD_FLAGS)),
            TaskEntry(
                label="watch",
                args=("watch", "run", "--project", project_file, *_BUILD_FLAGS),
            ),
        )
        logger.debug("created %d task(s) for %s", len(tasks), project_file)
        return TaskDocument(tasks=tasks)

    def create_tasks_json(self) -> str:
        return dump_json_pretty(self.create_tasks_configuration().to_json())

    # launch.json

    def create_launch_json_configurations(
        self, launch_type: ProgramLaunchType | str | None = None
    ) -> list[LaunchConfiguration]:
        project = self.startup_project
        resolved = (
            self.compute_program_launch_type()
            if launch_type is None
            else ProgramLaunchType(launch_type)
        )
        configurations = _LAUNCH_BUILDERS[resolved](self, project)
        logger.debug("created %s launch configuration for %s", resolved.value, project.path)
        return configurations

    def create_launch_document(
        self, launch_type: ProgramLaunchType | str | None = None
    ) -> JSONObject:
        return {
            "version": LAUNCH_DOCUMENT_VERSION,
            "configurations": [
                configuration.to_json()
                for configuration in self.create_launch_json_configurations(launch_type)
            ],
        }

    def create_launch_json(self, launch_type: ProgramLaunchType | str | None = None) -> str:
        return dump_json_pretty(self.create_launch_document(launch_type))


def _console_configurations(
    generator: AssetGenerator, project: ProjectDescriptor
) -> list[LaunchConfiguration]:
    return [
        ConsoleLaunchConfiguration(
            program=generator._program_path(project),
            cwd=generator._project_cwd(project),
        ),
        AttachConfiguration(),
    ]


def _web_configurations(
    generator: AssetGenerator, project: ProjectDescriptor
) -> list[LaunchConfiguration]:
    return [
        WebLaunchConfiguration(
            program=generator._program_path(project),
            cwd=generator._project_cwd(project),
        ),
        AttachConfiguration(),
    ]


def _blazor_standalone_configurations(
    generator: AssetGenerator, project: ProjectDescriptor
) -> list[LaunchConfiguration]:
    # Served by the debug proxy's web host; there is no process to launch or attach to.
    return [BlazorStandaloneLaunchConfiguration(cwd=generator._project_cwd(project))]


def _blazor_hosted_configurations(
    generator: AssetGenerator, project: ProjectDescriptor
) -> list[LaunchConfiguration]:
    return [
        BlazorHostedLaunchConfiguration(
            program=generator._program_path(project),
            cwd=generator._project_cwd(project),
        )
    ]


_LAUNCH_BUILDERS = {
    ProgramLaunchType.CONSOLE: _console_configurations,
    ProgramLaunchType.WEB: _web_configurations,
    ProgramLaunchType.BLAZOR_WEBASSEMBLY_STANDALONE: _blazor_standalone_configurations,
    ProgramLaunchType.BLAZOR_WEBASSEMBLY_HOSTED: _blazor_hosted_configurations,
}

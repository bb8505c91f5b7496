"""Reduce build-information responses to the flat project model."""

from __future__ import annotations

from typing import Mapping

from devassets.assets.frameworks import is_net_framework, normalize_short_name, same_framework
from devassets.assets.model import ProjectDescriptor, TargetFramework, WorkspaceInfo
from devassets.assets.paths import is_absolute, join_path, parent_directory
from devassets.config import DEFAULT_BUILD_CONFIGURATION
from devassets.exceptions import ConfigurationUnavailable
from devassets.logging import get_logger
from devassets.schema import MSBuildProjectDTO, WorkspaceInformationResponse

logger = get_logger("assets.adapter")


def _coerce_response(
    response: WorkspaceInformationResponse | Mapping[str, object],
) -> WorkspaceInformationResponse:
    if isinstance(response, WorkspaceInformationResponse):
        return response
    return WorkspaceInformationResponse.model_validate(dict(response))


def _select_framework_index(
    frameworks: tuple[TargetFramework, ...], preferred: str | None
) -> int:
    if preferred:
        for index, framework in enumerate(frameworks):
            if same_framework(framework.short_name, preferred):
                return index
        logger.debug("preferred framework %s not listed; using the first", preferred)
    return 0


def default_output_path(
    project_path: str,
    assembly_name: str,
    framework: TargetFramework,
    *,
    is_executable: bool = True,
    configuration: str = DEFAULT_BUILD_CONFIGURATION,
) -> str:
    """Default build output: ``<projectDir>/bin/<configuration>/<tfm>/<assembly>.dll``.

    Classic .NET Framework executables are the one case that builds to
    ``.exe``; everything else the debugger launches is a managed ``.dll``.
    """
    short_name = normalize_short_name(framework.short_name)
    suffix = ".exe" if is_executable and is_net_framework(short_name) else ".dll"
    directory = parent_directory(project_path)
    return join_path(directory, "bin", configuration, short_name, f"{assembly_name}{suffix}")


def _resolve_output_path(
    dto: MSBuildProjectDTO,
    project_path: str,
    framework: TargetFramework | None,
    *,
    configuration: str,
) -> str:
    if dto.target_path:
        return _anchor(dto.target_path, project_path)
    if dto.output_path:
        output = _anchor(dto.output_path, project_path)
        if output.lower().endswith((".dll", ".exe")):
            return output
        return join_path(output, f"{dto.assembly_name}.dll")
    if framework is None:
        return ""
    return default_output_path(
        project_path,
        dto.assembly_name,
        framework,
        is_executable=dto.is_exe,
        configuration=configuration,
    )


def _anchor(path: str, project_path: str) -> str:
    if is_absolute(path):
        return path
    return join_path(parent_directory(project_path), path)


def adapt_project(
    dto: MSBuildProjectDTO,
    workspace_root: str,
    *,
    preferred_framework: str | None = None,
    configuration: str = DEFAULT_BUILD_CONFIGURATION,
) -> ProjectDescriptor:
    project_path = dto.path if is_absolute(dto.path) else join_path(workspace_root, dto.path)
    frameworks = tuple(
        TargetFramework(
            short_name=item.short_name,
            name=item.name,
            friendly_name=item.friendly_name,
        )
        for item in dto.target_frameworks
    )
    if not frameworks and dto.target_framework:
        frameworks = (TargetFramework(short_name=dto.target_framework),)
    framework_index = _select_framework_index(frameworks, preferred_framework)
    framework = frameworks[framework_index] if frameworks else None
    return ProjectDescriptor(
        path=project_path,
        assembly_name=dto.assembly_name,
        target_frameworks=frameworks,
        output_path=_resolve_output_path(
            dto, project_path, framework, configuration=configuration
        ),
        source_files=tuple(dto.source_files),
        is_executable=dto.is_exe,
        is_web_project=dto.is_web_project,
        is_blazor_standalone=dto.is_blazor_webassembly_standalone,
        is_blazor_hosted=dto.is_blazor_webassembly_hosted,
        is_unity_project=dto.is_unity_project,
        framework_index=framework_index,
    )


def adapt_workspace_information(
    response: WorkspaceInformationResponse | Mapping[str, object],
    workspace_root: str,
    *,
    preferred_framework: str | None = None,
    configuration: str = DEFAULT_BUILD_CONFIGURATION,
) -> WorkspaceInfo:
    """Flatten a build-information response into a :class:`WorkspaceInfo`.

    Relative project paths are anchored at ``workspace_root``. Raises
    :class:`ConfigurationUnavailable` when no projects were reported.
    """
    model = _coerce_response(response)
    msbuild = model.msbuild
    if msbuild is None or not msbuild.projects:
        raise ConfigurationUnavailable(
            "Could not locate .NET projects in the workspace information."
        )
    projects = tuple(
        adapt_project(
            dto,
            workspace_root,
            preferred_framework=preferred_framework,
            configuration=configuration,
        )
        for dto in msbuild.projects
    )
    logger.debug("adapted %d project(s) under %s", len(projects), workspace_root)
    return WorkspaceInfo(projects=projects, solution_path=msbuild.solution_path or None)

from __future__ import annotations

from pathlib import Path

from devassets.assets import AssetGenerator, WorkspaceFolder


def make_project(
    project_path: str,
    assembly_name: str = "testApp",
    short_name: str = "netcoreapp1.0",
    *,
    is_exe: bool = True,
    is_web: bool = False,
    standalone: bool = False,
    hosted: bool = False,
    target_path: str = "",
    output_path: str = "",
    frameworks: list[str] | None = None,
    source_files: list[str] | None = None,
) -> dict[str, object]:
    short_names = frameworks if frameworks is not None else [short_name]
    return {
        "ProjectGuid": "",
        "Path": project_path,
        "AssemblyName": assembly_name,
        "TargetPath": target_path,
        "TargetFramework": "",
        "SourceFiles": list(source_files or []),
        "TargetFrameworks": [
            {"Name": "", "FriendlyName": "", "ShortName": name} for name in short_names
        ],
        "OutputPath": output_path,
        "IsExe": is_exe,
        "IsUnityProject": False,
        "IsWebProject": is_web,
        "IsBlazorWebAssemblyHosted": hosted,
        "IsBlazorWebAssemblyStandalone": standalone,
    }


def make_workspace_information(*projects: dict[str, object]) -> dict[str, object]:
    return {"MsBuild": {"SolutionPath": "", "Projects": list(projects)}}


def make_generator(
    root: Path,
    project_path: Path,
    short_name: str = "netcoreapp1.0",
    **flags,
) -> AssetGenerator:
    info = make_workspace_information(
        make_project(str(project_path), "testApp", short_name, **flags)
    )
    generator = AssetGenerator.from_workspace_information(info, WorkspaceFolder.from_path(root))
    generator.set_startup_project(0)
    return generator

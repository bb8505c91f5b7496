from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    """Build-information payloads use PascalCase keys on the wire."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TargetFrameworkDTO(_WireModel):
    name: str = Field(default="", alias="Name")
    friendly_name: str = Field(default="", alias="FriendlyName")
    short_name: str = Field(default="", alias="ShortName")


class MSBuildProjectDTO(_WireModel):
    project_guid: str = Field(default="", alias="ProjectGuid")
    path: str = Field(alias="Path")
    assembly_name: str = Field(default="", alias="AssemblyName")
    target_path: str = Field(default="", alias="TargetPath")
    target_framework: str = Field(default="", alias="TargetFramework")
    source_files: List[str] = Field(default_factory=list, alias="SourceFiles")
    target_frameworks: List[TargetFrameworkDTO] = Field(
        default_factory=list, alias="TargetFrameworks"
    )
    output_path: str = Field(default="", alias="OutputPath")
    is_exe: bool = Field(default=False, alias="IsExe")
    is_unity_project: bool = Field(default=False, alias="IsUnityProject")
    is_web_project: bool = Field(default=False, alias="IsWebProject")
    is_blazor_webassembly_hosted: bool = Field(
        default=False, alias="IsBlazorWebAssemblyHosted"
    )
    is_blazor_webassembly_standalone: bool = Field(
        default=False, alias="IsBlazorWebAssemblyStandalone"
    )


class MSBuildWorkspaceDTO(_WireModel):
    solution_path: Optional[str] = Field(default=None, alias="SolutionPath")
    projects: List[MSBuildProjectDTO] = Field(default_factory=list, alias="Projects")


class WorkspaceInformationResponse(_WireModel):
    msbuild: Optional[MSBuildWorkspaceDTO] = Field(default=None, alias="MsBuild")


class GenerateAssetsRequest(BaseModel):
    workspace_information: WorkspaceInformationResponse
    root: str
    startup_project: int = 0
    launch_type: Optional[str] = None
    preferred_framework: Optional[str] = None
    configuration: Optional[str] = None


class GenerateAssetsResponse(BaseModel):
    exit_code: int = 0
    tasks: Dict[str, object] = {}
    launch: Dict[str, object] = {}
    launch_type: Optional[str] = None
    errors: List[str] = []


class ClassifyWorkspaceRequest(BaseModel):
    workspace_information: WorkspaceInformationResponse
    root: str
    threshold: Optional[int] = None


class ClassifyWorkspaceResponse(BaseModel):
    exit_code: int = 0
    workspace_size: Optional[str] = None
    source_files: int = 0
    errors: List[str] = []


class DiagnosticDTO(BaseModel):
    code: str = ""
    message: str
    severity: str = "warning"
    start: tuple[int, int] = (0, 0)
    end: tuple[int, int] = (0, 0)
    source: Optional[str] = None
    tags: List[str] = []


class BeginAnalysisRequest(BaseModel):
    uri: str


class IngestDiagnosticsRequest(BaseModel):
    uri: str
    diagnostics: List[DiagnosticDTO] = []


class QueryDiagnosticsRequest(BaseModel):
    uri: str
    is_open: Optional[bool] = None
    workspace_size: Optional[str] = None


class QueryDiagnosticsResponse(BaseModel):
    exit_code: int = 0
    uri: str
    state: Optional[str] = None
    diagnostics: List[DiagnosticDTO] = []
    errors: List[str] = []

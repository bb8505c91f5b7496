from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from pygls.lsp.server import LanguageServer
from pydantic import ValidationError
from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity as LspSeverity,
    DiagnosticTag as LspTag,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
)

from devassets import __version__
from devassets.assets import AssetGenerator, ProgramLaunchType, WorkspaceFolder
from devassets.assets.adapter import adapt_workspace_information
from devassets.config import (
    assets_defaults,
    build_configuration,
    diagnostics_defaults,
    max_project_file_count,
    merge_payload,
    preferred_framework,
)
from devassets.diagnostics import (
    DiagnosticRecord,
    DiagnosticSeverity,
    DiagnosticTag,
    DiagnosticsReconciler,
    TagRules,
    TextRange,
    WorkspaceSizeClass,
    classify_workspace,
)
from devassets.exceptions import DevAssetsError, InvalidPayload
from devassets.json_types import JSONObject
from devassets.logging import get_logger
from devassets.schema import (
    BeginAnalysisRequest,
    ClassifyWorkspaceRequest,
    ClassifyWorkspaceResponse,
    DiagnosticDTO,
    GenerateAssetsRequest,
    GenerateAssetsResponse,
    IngestDiagnosticsRequest,
    QueryDiagnosticsRequest,
    QueryDiagnosticsResponse,
)

logger = get_logger("server")

server = LanguageServer("devassets", __version__)
GENERATE_ASSETS_COMMAND = "devassets.generateAssets"
CLASSIFY_WORKSPACE_COMMAND = "devassets.classifyWorkspace"
BEGIN_ANALYSIS_COMMAND = "devassets.beginAnalysis"
INGEST_DIAGNOSTICS_COMMAND = "devassets.ingestDiagnostics"
QUERY_DIAGNOSTICS_COMMAND = "devassets.queryDiagnostics"

_SEVERITY_TO_LSP = {
    DiagnosticSeverity.ERROR: LspSeverity.Error,
    DiagnosticSeverity.WARNING: LspSeverity.Warning,
    DiagnosticSeverity.INFO: LspSeverity.Information,
    DiagnosticSeverity.HIDDEN: LspSeverity.Hint,
}
_TAG_TO_LSP = {
    DiagnosticTag.UNNECESSARY: LspTag.Unnecessary,
    DiagnosticTag.DEPRECATED: LspTag.Deprecated,
}


@dataclass
class DiagnosticsSession:
    reconciler: DiagnosticsReconciler = field(default_factory=DiagnosticsReconciler)
    open_documents: set[str] = field(default_factory=set)
    workspace_size: WorkspaceSizeClass = WorkspaceSizeClass.NORMAL

    def is_open(self, uri: str) -> bool:
        return uri in self.open_documents

    def visible(self, uri: str) -> tuple[DiagnosticRecord, ...]:
        return self.reconciler.query(uri, self.is_open(uri), self.workspace_size)


session = DiagnosticsSession()


def reset_session(root: Path | None = None, config_path: Path | None = None) -> DiagnosticsSession:
    """Replace the process-wide session, picking up tag rules from config."""
    global session
    rules = TagRules.from_config(diagnostics_defaults(root, config_path))
    session = DiagnosticsSession(reconciler=DiagnosticsReconciler(rules))
    return session


def _require_payload(payload: object, *, command: str) -> dict[str, object]:
    if payload is None:
        raise InvalidPayload(f"missing command payload for {command}")
    if not isinstance(payload, dict):
        raise InvalidPayload(
            f"invalid command payload type for {command}: {type(payload).__name__}"
        )
    return payload


def _parse_severity(value: str) -> DiagnosticSeverity:
    text = value.strip().lower()
    if text in {"information", "informational"}:
        return DiagnosticSeverity.INFO
    try:
        return DiagnosticSeverity(text)
    except ValueError:
        return DiagnosticSeverity.WARNING


def record_from_dto(uri: str, dto: DiagnosticDTO) -> DiagnosticRecord:
    tags: set[DiagnosticTag] = set()
    for raw in dto.tags:
        try:
            tags.add(DiagnosticTag(raw.strip().lower()))
        except ValueError:
            continue
    return DiagnosticRecord(
        document_uri=uri,
        code=dto.code,
        message=dto.message,
        severity=_parse_severity(dto.severity),
        range=TextRange(dto.start[0], dto.start[1], dto.end[0], dto.end[1]),
        source=dto.source,
        tags=frozenset(tags),
    )


def dto_from_record(record: DiagnosticRecord) -> DiagnosticDTO:
    return DiagnosticDTO(
        code=record.code,
        message=record.message,
        severity=record.severity.value,
        start=(record.range.start_line, record.range.start_character),
        end=(record.range.end_line, record.range.end_character),
        source=record.source,
        tags=sorted(tag.value for tag in record.tags),
    )


def to_lsp_diagnostic(record: DiagnosticRecord) -> Diagnostic:
    tags = [_TAG_TO_LSP[tag] for tag in DiagnosticTag if tag in record.tags]
    return Diagnostic(
        range=Range(
            start=Position(line=record.range.start_line, character=record.range.start_character),
            end=Position(line=record.range.end_line, character=record.range.end_character),
        ),
        message=record.message,
        severity=_SEVERITY_TO_LSP[record.severity],
        code=record.code or None,
        source=record.source or "devassets",
        tags=tags or None,
    )


def publish_visible(ls: LanguageServer, uri: str) -> list[Diagnostic]:
    diagnostics = [to_lsp_diagnostic(record) for record in session.visible(uri)]
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )
    return diagnostics


def generate_assets(payload: dict[str, object]) -> JSONObject:
    try:
        request = GenerateAssetsRequest.model_validate(payload)
    except ValidationError as exc:
        return GenerateAssetsResponse(exit_code=2, errors=[str(exc)]).model_dump()
    root = Path(request.root)
    settings = merge_payload(
        {
            "preferred_framework": request.preferred_framework,
            "configuration": request.configuration,
        },
        assets_defaults(root),
    )
    folder = WorkspaceFolder.from_path(root)
    try:
        generator = AssetGenerator.from_workspace_information(
            request.workspace_information,
            folder,
            preferred_framework=preferred_framework(settings),
            configuration=build_configuration(settings),
        )
        generator.set_startup_project(request.startup_project)
        launch_type = (
            ProgramLaunchType(request.launch_type)
            if request.launch_type
            else generator.compute_program_launch_type()
        )
        response = GenerateAssetsResponse(
            tasks=generator.create_tasks_configuration().to_json(),
            launch=generator.create_launch_document(launch_type),
            launch_type=launch_type.value,
        )
    except (DevAssetsError, ValueError) as exc:
        logger.info("asset generation failed: %s", exc)
        return GenerateAssetsResponse(exit_code=2, errors=[str(exc)]).model_dump()
    return response.model_dump()


def classify(payload: dict[str, object]) -> JSONObject:
    try:
        request = ClassifyWorkspaceRequest.model_validate(payload)
    except ValidationError as exc:
        return ClassifyWorkspaceResponse(exit_code=2, errors=[str(exc)]).model_dump()
    root = Path(request.root)
    threshold = request.threshold or max_project_file_count(diagnostics_defaults(root))
    try:
        info = adapt_workspace_information(
            request.workspace_information, WorkspaceFolder.from_path(root).root_path
        )
    except DevAssetsError as exc:
        return ClassifyWorkspaceResponse(exit_code=2, errors=[str(exc)]).model_dump()
    session.workspace_size = classify_workspace(info, threshold)
    logger.debug(
        "workspace classified %s (%d source files)",
        session.workspace_size.value,
        info.source_file_count,
    )
    return ClassifyWorkspaceResponse(
        workspace_size=session.workspace_size.value,
        source_files=info.source_file_count,
    ).model_dump()


def begin_analysis(payload: dict[str, object]) -> JSONObject:
    try:
        request = BeginAnalysisRequest.model_validate(payload)
    except ValidationError as exc:
        return {"exit_code": 2, "errors": [str(exc)]}
    session.reconciler.begin_analysis(request.uri)
    return {
        "exit_code": 0,
        "uri": request.uri,
        "state": session.reconciler.state(request.uri).value,
    }


def ingest(payload: dict[str, object]) -> tuple[str, JSONObject]:
    request = IngestDiagnosticsRequest.model_validate(payload)
    stored = session.reconciler.ingest(
        request.uri,
        [record_from_dto(request.uri, dto) for dto in request.diagnostics],
    )
    return request.uri, {"exit_code": 0, "uri": request.uri, "stored": len(stored)}


def query(payload: dict[str, object]) -> JSONObject:
    try:
        request = QueryDiagnosticsRequest.model_validate(payload)
    except ValidationError as exc:
        return {"exit_code": 2, "diagnostics": [], "errors": [str(exc)]}
    is_open = session.is_open(request.uri) if request.is_open is None else request.is_open
    try:
        workspace_size = WorkspaceSizeClass(request.workspace_size or session.workspace_size)
    except ValueError as exc:
        return {"exit_code": 2, "diagnostics": [], "errors": [str(exc)]}
    records = session.reconciler.query(request.uri, is_open, workspace_size)
    return QueryDiagnosticsResponse(
        uri=request.uri,
        state=session.reconciler.state(request.uri).value,
        diagnostics=[dto_from_record(record) for record in records],
    ).model_dump()


@server.command(GENERATE_ASSETS_COMMAND)
def execute_generate_assets(ls: LanguageServer, payload: dict | None = None) -> dict:
    return generate_assets(_require_payload(payload, command=GENERATE_ASSETS_COMMAND))


@server.command(CLASSIFY_WORKSPACE_COMMAND)
def execute_classify_workspace(ls: LanguageServer, payload: dict | None = None) -> dict:
    result = classify(_require_payload(payload, command=CLASSIFY_WORKSPACE_COMMAND))
    if result.get("exit_code") == 0:
        for uri in session.reconciler.documents():
            publish_visible(ls, uri)
    return result


@server.command(BEGIN_ANALYSIS_COMMAND)
def execute_begin_analysis(ls: LanguageServer, payload: dict | None = None) -> dict:
    return begin_analysis(_require_payload(payload, command=BEGIN_ANALYSIS_COMMAND))


@server.command(INGEST_DIAGNOSTICS_COMMAND)
def execute_ingest_diagnostics(ls: LanguageServer, payload: dict | None = None) -> dict:
    try:
        uri, result = ingest(_require_payload(payload, command=INGEST_DIAGNOSTICS_COMMAND))
    except ValidationError as exc:
        return {"exit_code": 2, "errors": [str(exc)]}
    publish_visible(ls, uri)
    return result


@server.command(QUERY_DIAGNOSTICS_COMMAND)
def execute_query_diagnostics(ls: LanguageServer, payload: dict | None = None) -> dict:
    return query(_require_payload(payload, command=QUERY_DIAGNOSTICS_COMMAND))


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    uri = params.text_document.uri
    session.open_documents.add(uri)
    publish_visible(ls, uri)


@server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: LanguageServer, params: DidCloseTextDocumentParams) -> None:
    uri = params.text_document.uri
    session.open_documents.discard(uri)
    publish_visible(ls, uri)


def start(start_fn: Callable[[], None] | None = None) -> None:
    """Start the language server over stdio."""
    (start_fn or server.start_io)()


if __name__ == "__main__":  # pragma: no cover
    start()  # pragma: no cover

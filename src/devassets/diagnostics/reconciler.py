"""Per-document diagnostics store fed by whole-document analysis batches.

Each document maps to an immutable tuple of records. Ingesting a batch builds
the new tuple off to the side and swaps it in with a single assignment, so a
concurrent reader sees either the previous set or the new one. Visibility is
decided at query time; hidden records are kept so that opening a document or
reclassifying the workspace takes effect without re-analysis.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Iterable

from devassets.assets.model import WorkspaceInfo
from devassets.config import DEFAULT_MAX_PROJECT_FILE_COUNT
from devassets.diagnostics.model import (
    DiagnosticKey,
    DiagnosticRecord,
    DocumentState,
    WorkspaceSizeClass,
)
from devassets.diagnostics.tagging import TagRules, augment, is_visible_severity
from devassets.logging import get_logger

logger = get_logger("diagnostics.reconciler")


def classify_workspace(
    workspace: WorkspaceInfo | int,
    threshold: int = DEFAULT_MAX_PROJECT_FILE_COUNT,
) -> WorkspaceSizeClass:
    """Classify a workspace by its source-file count."""
    count = workspace if isinstance(workspace, int) else workspace.source_file_count
    if count > threshold:
        return WorkspaceSizeClass.LARGE
    return WorkspaceSizeClass.NORMAL


def is_visible(is_open: bool, workspace_size: WorkspaceSizeClass | str) -> bool:
    if is_open:
        return True
    try:
        size = WorkspaceSizeClass(workspace_size)
    except ValueError:
        logger.warning("unknown workspace size class %r; treating as normal", workspace_size)
        size = WorkspaceSizeClass.NORMAL
    return size is not WorkspaceSizeClass.LARGE


class DiagnosticsReconciler:
    def __init__(self, rules: TagRules | None = None):
        self.rules = rules or TagRules()
        self._entries: dict[str, tuple[DiagnosticRecord, ...]] = {}
        self._states: dict[str, DocumentState] = {}
        # Serializes writers only; readers never take it.
        self._write_lock = threading.Lock()

    def begin_analysis(self, document_uri: str) -> None:
        with self._write_lock:
            self._states[document_uri] = DocumentState.ANALYZING

    def ingest(
        self, document_uri: str, batch: Iterable[DiagnosticRecord]
    ) -> tuple[DiagnosticRecord, ...]:
        """Replace the stored findings for ``document_uri`` with ``batch``."""
        records = self._reconcile(document_uri, batch)
        with self._write_lock:
            self._entries[document_uri] = records
            self._states[document_uri] = DocumentState.HAS_RESULTS
        logger.debug("stored %d diagnostic(s) for %s", len(records), document_uri)
        return records

    def _reconcile(
        self, document_uri: str, batch: Iterable[DiagnosticRecord]
    ) -> tuple[DiagnosticRecord, ...]:
        seen: set[DiagnosticKey] = set()
        records: list[DiagnosticRecord] = []
        for record in batch:
            if record.document_uri != document_uri:
                record = replace(record, document_uri=document_uri)
            record = augment(record, self.rules)
            if not is_visible_severity(record, self.rules):
                continue
            if record.key in seen:
                continue
            seen.add(record.key)
            records.append(record)
        return tuple(records)

    def query(
        self,
        document_uri: str,
        is_open: bool,
        workspace_size: WorkspaceSizeClass | str = WorkspaceSizeClass.NORMAL,
    ) -> tuple[DiagnosticRecord, ...]:
        if not is_visible(is_open, workspace_size):
            return ()
        return self._entries.get(document_uri, ())

    def state(self, document_uri: str) -> DocumentState:
        return self._states.get(document_uri, DocumentState.UNANALYZED)

    def documents(self) -> list[str]:
        return list(self._entries)

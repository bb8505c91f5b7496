"""Diagnostics reconciliation for pushed analysis results."""

from devassets.diagnostics.model import (
    DiagnosticRecord,
    DiagnosticSeverity,
    DiagnosticTag,
    DocumentState,
    TextRange,
    WorkspaceSizeClass,
)
from devassets.diagnostics.polling import poll
from devassets.diagnostics.reconciler import (
    DiagnosticsReconciler,
    classify_workspace,
    is_visible,
)
from devassets.diagnostics.tagging import TagRules, augment

__all__ = [
    "DiagnosticRecord",
    "DiagnosticSeverity",
    "DiagnosticTag",
    "DiagnosticsReconciler",
    "DocumentState",
    "TagRules",
    "TextRange",
    "WorkspaceSizeClass",
    "augment",
    "classify_workspace",
    "is_visible",
    "poll",
]

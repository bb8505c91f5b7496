from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum


class DiagnosticTag(StrEnum):
    UNNECESSARY = "unnecessary"
    DEPRECATED = "deprecated"


class DiagnosticSeverity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HIDDEN = "hidden"


class WorkspaceSizeClass(StrEnum):
    NORMAL = "normal"
    LARGE = "large"

    @classmethod
    def _missing_(cls, value: object) -> "WorkspaceSizeClass | None":
        if isinstance(value, str):
            folded = value.strip().lower()
            for member in cls:
                if member.value == folded:
                    return member
        return None


class DocumentState(StrEnum):
    UNANALYZED = "unanalyzed"
    ANALYZING = "analyzing"
    HAS_RESULTS = "has_results"


@dataclass(frozen=True)
class TextRange:
    start_line: int = 0
    start_character: int = 0
    end_line: int = 0
    end_character: int = 0


DiagnosticKey = tuple[str, str, TextRange]


@dataclass(frozen=True)
class DiagnosticRecord:
    document_uri: str
    code: str
    message: str
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    range: TextRange = field(default_factory=TextRange)
    source: str | None = None
    tags: frozenset[DiagnosticTag] = frozenset()

    @property
    def key(self) -> DiagnosticKey:
        return (self.document_uri, self.code, self.range)

    def with_tags(self, *tags: DiagnosticTag) -> "DiagnosticRecord":
        merged = self.tags.union(tags)
        if merged == self.tags:
            return self
        return replace(self, tags=frozenset(merged))

"""Tag augmentation for analysis findings.

Upstream engines do not always attach tags, so findings whose codes are known
to describe redundant code are tagged Unnecessary (rendered faded) and
obsolete-API findings are tagged Deprecated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Iterable

from devassets.config import TomlTable, deprecated_codes, suppress_hidden, unnecessary_codes
from devassets.diagnostics.model import DiagnosticRecord, DiagnosticSeverity, DiagnosticTag

DEFAULT_UNNECESSARY_CODES = frozenset(
    {
        "CS0162",  # unreachable code
        "CS0168",  # variable declared but never used
        "CS0219",  # variable assigned but its value is never used
        "CS8019",  # unnecessary using directive
        "IDE0005",  # unnecessary using directive
        "IDE0051",  # unused private member
        "IDE0052",  # unread private member
        "IDE0059",  # unnecessary value assignment
        "IDE0060",  # unused parameter
    }
)
DEFAULT_DEPRECATED_CODES = frozenset({"CS0612", "CS0618"})

_CODE_IN_MESSAGE_RE = re.compile(r"\b(?:CS|IDE|CA|RCS)\d{4}\b")


@dataclass(frozen=True)
class TagRules:
    unnecessary_codes: frozenset[str] = DEFAULT_UNNECESSARY_CODES
    deprecated_codes: frozenset[str] = DEFAULT_DEPRECATED_CODES
    suppress_hidden: bool = True

    @classmethod
    def from_config(cls, section: TomlTable | None) -> "TagRules":
        unnecessary = unnecessary_codes(section)
        deprecated = deprecated_codes(section)
        return cls(
            unnecessary_codes=(
                DEFAULT_UNNECESSARY_CODES
                if unnecessary is None
                else _normalize_codes(unnecessary)
            ),
            deprecated_codes=(
                DEFAULT_DEPRECATED_CODES
                if deprecated is None
                else _normalize_codes(deprecated)
            ),
            suppress_hidden=suppress_hidden(section),
        )


def _normalize_codes(codes: Iterable[str]) -> frozenset[str]:
    return frozenset(code.strip().upper() for code in codes if code.strip())


def resolve_code(record: DiagnosticRecord) -> str:
    """Return the diagnostic code, falling back to one quoted in the message."""
    if record.code:
        return record.code.strip().upper()
    match = _CODE_IN_MESSAGE_RE.search(record.message)
    return match.group(0) if match else ""


def augment(record: DiagnosticRecord, rules: TagRules) -> DiagnosticRecord:
    code = resolve_code(record)
    if code and code != record.code:
        record = replace(record, code=code)
    if code in rules.unnecessary_codes:
        record = record.with_tags(DiagnosticTag.UNNECESSARY)
    if code in rules.deprecated_codes:
        record = record.with_tags(DiagnosticTag.DEPRECATED)
    return record


def is_visible_severity(record: DiagnosticRecord, rules: TagRules) -> bool:
    # Hidden findings only matter when they drive the faded rendering.
    if not rules.suppress_hidden:
        return True
    if record.severity != DiagnosticSeverity.HIDDEN:
        return True
    return DiagnosticTag.UNNECESSARY in record.tags

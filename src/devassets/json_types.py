from __future__ import annotations

"""JSON-like value types used for generated documents and command payloads.

Generated task and launch documents are persisted as JSON by the caller, so
their value space is declared as JSON-compatible rather than `Any`.
"""

from typing import TypeAlias


JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]

"""Errors raised when strict assembly detects upstream schema drift."""

from __future__ import annotations


class SchemaDriftError(RuntimeError):
    """Raw data contains something the current model does not understand."""


class UnknownTagError(SchemaDriftError):
    """An enum-like raw tag is not part of the known vocabulary."""

    def __init__(self, field: str, value: object, *, record_id: str | None = None) -> None:
        self.field = field
        self.value = value
        self.record_id = record_id
        where = f" on {record_id}" if record_id else ""
        super().__init__(f"unknown {field} tag {value!r}{where}")


class UnresolvedTemplateKeyError(SchemaDriftError):
    """A description placeholder has no matching blackboard entry."""

    def __init__(self, key: str, text: str) -> None:
        self.key = key
        self.text = text
        super().__init__(f"template key {key!r} missing from blackboard")


class DataLoadError(RuntimeError):
    """A raw table could not be read or decoded; nothing was loaded."""

    def __init__(self, table: str, path: object, reason: str) -> None:
        self.table = table
        self.path = path
        super().__init__(f"failed to load {table} from {path}: {reason}")

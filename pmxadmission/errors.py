"""Admission errors and field paths used by the validators."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable


class FieldPath:
    """A dotted path to a field inside a resource, such as ``spec.network``."""

    __slots__ = ("_segments",)

    def __init__(self, *segments: object) -> None:
        self._segments = tuple(str(segment) for segment in segments)

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    def child(self, *args: object) -> FieldPath:
        """Return a new path extended by the given segments."""
        return FieldPath(*self._segments, *args)

    def __str__(self) -> str:
        return ".".join(self._segments)

    def __repr__(self) -> str:
        return f"FieldPath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldPath):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return "[]string{" + ", ".join(json.dumps(v) for v in value) + "}"
    return repr(value)


@dataclass
class FieldError:
    """A single invalid value found at a field path."""

    path: FieldPath
    value: Any
    detail: str

    def __str__(self) -> str:
        return f"{self.path}: Invalid value: {_format_value(self.value)}: {self.detail}"


def invalid(path: FieldPath, value: Any, detail: str) -> FieldError:
    """Describe an invalid value at ``path``."""
    return FieldError(path, value, detail)


class AdmissionError(Exception):
    """A request was refused; ``warnings`` carries messages for the caller."""

    def __init__(self, message: str, warnings: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.warnings: list[str] = list(warnings)

    def __str__(self) -> str:
        return self.message


class BadRequestError(AdmissionError):
    """The object handed to a validator was of the wrong kind."""


class InvalidError(AdmissionError):
    """The object holds one or more invalid field values."""

    def __init__(
        self,
        kind: str,
        name: str,
        errors: Iterable[FieldError],
        warnings: Iterable[str] = (),
    ) -> None:
        self.kind = kind
        self.name = name
        self.errors: list[FieldError] = list(errors)
        if len(self.errors) == 1:
            body = str(self.errors[0])
        else:
            body = "[" + ", ".join(str(error) for error in self.errors) + "]"
        super().__init__(f'{kind} "{name}" is invalid: {body}', warnings)
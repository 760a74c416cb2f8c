"""Consequence results: header and value lists and their JSON form."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from floodconsequences.parameters import Parameter, parameter_to_json

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode_string(text: str) -> str:
    encoded = json.dumps(text, ensure_ascii=False)
    for raw, escaped in _HTML_ESCAPES.items():
        encoded = encoded.replace(raw, escaped)
    return encoded


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        raise ValueError(f"unsupported value: {value!r}")
    magnitude = abs(value)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        mantissa, _, exponent = repr(value).partition("e")
        power = int(exponent)
        return f"{mantissa}e{'-' if power < 0 else '+'}{abs(power)}"
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def encode_value(value: Any) -> str:
    """Return the JSON text of one result value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Parameter):
        return parameter_to_json(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return _encode_string(value)
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(value, datetime):
        return _encode_string(value.isoformat())
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda item: str(item[0]))
        return "{" + ",".join(
            f"{_encode_string(str(key))}:{encode_value(item)}" for key, item in items
        ) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(encode_value(item) for item in value) + "]"
    raise TypeError(f"cannot encode {type(value).__name__} as JSON")


def _encode_row(headers: list[str], values: list[Any]) -> str:
    if len(values) < len(headers):
        raise ValueError(
            f"result has {len(values)} values for {len(headers)} headers"
        )
    body = ",".join(
        f"{_encode_string(header)}:{encode_value(value)}"
        for header, value in zip(headers, values)
    )
    return '{"consequence":{' + body + "}}"


@dataclass
class Result:
    """A list of headers with the matching list of values."""

    headers: list[str] = field(default_factory=list)
    result: list[Any] = field(default_factory=list)

    def fetch(self, parameter: str) -> Any:
        """Return the value stored under the header; raise KeyError if absent."""
        for header, value in zip(self.headers, self.result):
            if header == parameter:
                return value
        raise KeyError(f"Parameter {parameter} not found")

    def to_json(self) -> str:
        """Return the result as a JSON object keyed by its headers."""
        return _encode_row(self.headers, self.result)


@dataclass
class Results:
    """Many results sharing one header list, kept as a table of rows."""

    is_table: bool = False
    headers: list[str] = field(default_factory=list)
    rows: list[Any] = field(default_factory=list)

    def add_result(self, result: Result) -> None:
        """Append the values of a result as a new row."""
        self.is_table = True
        self.headers = result.headers
        self.rows.append(result.result)

    def to_json(self) -> str:
        """Return every row as a list of consequence objects."""
        encoded = [
            _encode_row(self.headers, row)
            for row in self.rows
            if isinstance(row, (list, tuple))
        ]
        return '{"consequences":[' + ",".join(encoded) + "]}"
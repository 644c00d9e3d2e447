"""URI templates: parsing and matching of concrete URIs against them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import unquote

_UNRESERVED = r"[A-Za-z0-9\-._~]|%[0-9A-Fa-f]{2}"
_RESERVED = r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2}"
_VARNAME = re.compile(
    r"(?:[A-Za-z0-9_]|%[0-9A-Fa-f]{2})(?:\.?(?:[A-Za-z0-9_]|%[0-9A-Fa-f]{2}))*"
)
_MAX_LENGTH = re.compile(r"[1-9][0-9]{0,3}")
_EXPRESSION = re.compile(r"\{([^{}]*)\}")
_RESERVED_OPERATORS = "=,!@|"


@dataclass(frozen=True)
class _Operator:
    first: str
    sep: str
    named: bool
    allow_reserved: bool


_OPERATORS = {
    "": _Operator("", ",", False, False),
    "+": _Operator("", ",", False, True),
    "#": _Operator("#", ",", False, True),
    ".": _Operator(".", ".", False, False),
    "/": _Operator("/", "/", False, False),
    ";": _Operator(";", ";", True, False),
    "?": _Operator("?", "&", True, False),
    "&": _Operator("&", "&", True, False),
}


@dataclass(frozen=True)
class _VarSpec:
    name: str
    explode: bool
    max_length: int | None


@dataclass(frozen=True)
class _Expression:
    operator: _Operator
    varspecs: tuple[_VarSpec, ...]

    def pattern(self, group: str) -> str:
        op = self.operator
        if op.allow_reserved:
            chars = _RESERVED
        else:
            chars = f"{_UNRESERVED}|{re.escape(op.sep)}|,|="
        body = f"(?P<{group}>(?:{chars})*)"
        if op.first:
            return f"(?:{re.escape(op.first)}{body})?"
        return body

    def extract(self, body: str, values: dict[str, list[str]]) -> None:
        items = body.split(self.operator.sep) if body else []
        if self.operator.named:
            self._extract_named(items, values)
        else:
            self._extract_positional(items, values)

    def _extract_named(self, items: list[str], values: dict[str, list[str]]) -> None:
        by_name = {spec.name: spec for spec in self.varspecs}
        exploded = next((spec for spec in self.varspecs if spec.explode), None)
        for item in items:
            name, _, value = item.partition("=")
            spec = by_name.get(name)
            if spec is None:
                if exploded is not None:
                    values.setdefault(exploded.name, []).extend(
                        [unquote(name), unquote(value)]
                    )
                continue
            bucket = values.setdefault(spec.name, [])
            if spec.explode:
                bucket.append(unquote(value))
            else:
                bucket.extend(unquote(part) for part in value.split(","))

    def _extract_positional(
        self, items: list[str], values: dict[str, list[str]]
    ) -> None:
        remaining = list(items)
        count = len(self.varspecs)
        for index, spec in enumerate(self.varspecs):
            if not remaining:
                break
            later = count - index - 1
            if spec.explode:
                take = max(1, len(remaining) - later)
                chunk, remaining = remaining[:take], remaining[take:]
                values[spec.name] = [unquote(part) for part in chunk]
            elif self.operator.sep == ",":
                take = len(remaining) if later == 0 else 1
                chunk, remaining = remaining[:take], remaining[take:]
                values[spec.name] = [unquote(part) for part in chunk]
            else:
                item = remaining.pop(0)
                values[spec.name] = [unquote(part) for part in item.split(",")]


def _parse_varspec(text: str) -> _VarSpec:
    explode = text.endswith("*")
    if explode:
        text = text[:-1]
    name, colon, length = text.partition(":")
    max_length = None
    if colon:
        if explode:
            raise ValueError(f"variable {name!r} cannot have both prefix and explode")
        if not _MAX_LENGTH.fullmatch(length):
            raise ValueError(f"invalid prefix length {length!r} for {name!r}")
        max_length = int(length)
    if not _VARNAME.fullmatch(name):
        raise ValueError(f"invalid variable name {name!r}")
    return _VarSpec(name, explode, max_length)


def _parse_expression(content: str) -> _Expression:
    if not content:
        raise ValueError("empty template expression")
    if content[0] in _RESERVED_OPERATORS:
        raise ValueError(f"reserved operator {content[0]!r} in expression")
    op_key = content[0] if content[0] in _OPERATORS else ""
    varlist = content[len(op_key):]
    specs = tuple(_parse_varspec(spec) for spec in varlist.split(","))
    return _Expression(_OPERATORS[op_key], specs)


def _check_literal(literal: str) -> None:
    if "{" in literal or "}" in literal:
        raise ValueError(f"unbalanced brace in template literal {literal!r}")


class URITemplate:
    """A URI template that can tell whether a URI fits it and extract values."""

    def __init__(self, raw: str) -> None:
        self._raw = raw
        pieces: list[str] = []
        expressions: list[_Expression] = []
        position = 0
        for found in _EXPRESSION.finditer(raw):
            literal = raw[position:found.start()]
            _check_literal(literal)
            pieces.append(re.escape(literal))
            expression = _parse_expression(found.group(1))
            pieces.append(expression.pattern(f"e{len(expressions)}"))
            expressions.append(expression)
            position = found.end()
        tail = raw[position:]
        _check_literal(tail)
        pieces.append(re.escape(tail))
        self._expressions = tuple(expressions)
        self._regex = re.compile("".join(pieces))

    @property
    def raw(self) -> str:
        """The template text as given."""
        return self._raw

    @property
    def regex(self) -> re.Pattern[str]:
        """The compiled pattern a URI must match in full."""
        return self._regex

    @property
    def variable_names(self) -> list[str]:
        return [spec.name for expr in self._expressions for spec in expr.varspecs]

    def matches(self, uri: str) -> bool:
        """True when the whole URI fits the template."""
        return self._regex.fullmatch(uri) is not None

    def match(self, uri: str) -> dict[str, list[str]] | None:
        """Return each variable's values, or None if the URI does not fit."""
        found = self._regex.fullmatch(uri)
        if found is None:
            return None
        values: dict[str, list[str]] = {}
        for index, expression in enumerate(self._expressions):
            body = found.group(f"e{index}")
            if body is None:
                continue
            expression.extract(body, values)
        return values

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"URITemplate({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, URITemplate):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)
"""XML Schema primitive type adapters.

Each adapter converts between the lexical form found in a document and the
Python value held by a bound record. ``parse`` rejects text that does not
match the schema grammar with a :class:`LexicalError`; ``format`` produces the
canonical lexical form, so ``parse(format(value)) == value`` for every valid
value.
"""

from __future__ import annotations

import base64
import binascii
from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
import math
import re
from typing import Any

from .exceptions import LexicalError, MarshalError

_NAME_START = (
    "A-Z_a-z\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u02ff\u0370-\u037d"
    "\u037f-\u1fff\u200c-\u200d\u2070-\u218f\u2c00-\u2fef\u3001-\ud7ff"
    "\uf900-\ufdcf\ufdf0-\ufffd\U00010000-\U000effff"
)
_NAME_CHAR = _NAME_START + "\\-.0-9\u00b7\u0300-\u036f\u203f-\u2040"
NCNAME_PATTERN = re.compile(f"^[{_NAME_START}][{_NAME_CHAR}]*$")

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$", re.ASCII)
_DOUBLE_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_DATE_TIME_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<tz>Z|[+-]\d{2}:\d{2})?$",
    re.ASCII,
)


def collapse(text: str) -> str:
    """Apply the XSD ``collapse`` whitespace facet."""
    return " ".join(text.split())


class SimpleType:
    """Base adapter: passthrough string content."""

    name = "string"

    def parse(self, text: str) -> Any:
        return text

    def format(self, value: Any) -> str:
        return str(value)

    def is_empty(self, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, (str, bytes, list, tuple)):
            return len(value) == 0
        return False

    def __repr__(self) -> str:
        return f"<xsdt {self.name}>"


class String(SimpleType):
    name = "string"


class AnyURI(SimpleType):
    name = "anyURI"

    def parse(self, text: str) -> str:
        return text.strip()


class Token(SimpleType):
    name = "token"

    def parse(self, text: str) -> str:
        return collapse(text)


class Language(Token):
    name = "language"


class Integer(SimpleType):
    name = "integer"
    minimum: int | None = None
    maximum: int | None = None

    def parse(self, text: str) -> int:
        raw = text.strip()
        if not _INTEGER_PATTERN.match(raw):
            raise LexicalError(self.name, text)
        value = int(raw)
        if self.minimum is not None and value < self.minimum:
            raise LexicalError(self.name, text)
        if self.maximum is not None and value > self.maximum:
            raise LexicalError(self.name, text)
        return value

    def format(self, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise MarshalError(f"{self.name} expects an int, got {type(value).__name__}")
        return str(value)


class Int(Integer):
    name = "int"
    minimum = -(2**31)
    maximum = 2**31 - 1


class Long(Integer):
    name = "long"
    minimum = -(2**63)
    maximum = 2**63 - 1


class PositiveInteger(Integer):
    name = "positiveInteger"
    minimum = 1


class NonNegativeInteger(Integer):
    name = "nonNegativeInteger"
    minimum = 0


class DecimalType(SimpleType):
    name = "decimal"

    def parse(self, text: str) -> Decimal:
        raw = text.strip()
        if not _DECIMAL_PATTERN.match(raw):
            raise LexicalError(self.name, text)
        try:
            return Decimal(raw)
        except InvalidOperation as exc:
            raise LexicalError(self.name, text) from exc

    def format(self, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
            raise MarshalError(f"decimal expects Decimal or int, got {type(value).__name__}")
        return format(Decimal(value), "f")


class Double(SimpleType):
    name = "double"

    def parse(self, text: str) -> float:
        raw = text.strip()
        if raw in ("INF", "+INF"):
            return math.inf
        if raw == "-INF":
            return -math.inf
        if raw == "NaN":
            return math.nan
        if not _DOUBLE_PATTERN.match(raw):
            raise LexicalError(self.name, text)
        return float(raw)

    def format(self, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, (float, int)):
            raise MarshalError(f"double expects a number, got {type(value).__name__}")
        number = float(value)
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "INF" if number > 0 else "-INF"
        return repr(number)


class DoubleList(SimpleType):
    name = "doubleList"
    _item = Double()

    def parse(self, text: str) -> list[float]:
        try:
            return [self._item.parse(part) for part in text.split()]
        except LexicalError as exc:
            raise LexicalError(self.name, text) from exc

    def format(self, value: Any) -> str:
        return " ".join(self._item.format(item) for item in value)


class Boolean(SimpleType):
    name = "boolean"

    def parse(self, text: str) -> bool:
        raw = text.strip()
        if raw in ("true", "1"):
            return True
        if raw in ("false", "0"):
            return False
        raise LexicalError(self.name, text)

    def format(self, value: Any) -> str:
        if not isinstance(value, bool):
            raise MarshalError(f"boolean expects a bool, got {type(value).__name__}")
        return "true" if value else "false"


class DateTime(SimpleType):
    """ISO 8601 profile ``YYYY-MM-DDTHH:MM:SS[.fff](Z|±HH:MM)``.

    A value without a zone designator parses to a naive datetime.
    """

    name = "dateTime"

    def parse(self, text: str) -> datetime:
        match = _DATE_TIME_PATTERN.match(text.strip())
        if match is None:
            raise LexicalError(self.name, text)
        parts = match.groupdict()
        fraction = parts["fraction"] or ""
        microsecond = int((fraction + "000000")[:6])
        try:
            return datetime(
                int(parts["year"]),
                int(parts["month"]),
                int(parts["day"]),
                int(parts["hour"]),
                int(parts["minute"]),
                int(parts["second"]),
                microsecond,
                tzinfo=self._zone(parts["tz"]),
            )
        except ValueError as exc:
            raise LexicalError(self.name, text) from exc

    @staticmethod
    def _zone(designator: str | None) -> timezone | None:
        if designator is None:
            return None
        if designator == "Z":
            return UTC
        sign = -1 if designator[0] == "-" else 1
        hours, minutes = int(designator[1:3]), int(designator[4:6])
        if hours > 14 or minutes > 59:
            raise ValueError(f"zone offset out of range: {designator}")
        return timezone(sign * timedelta(hours=hours, minutes=minutes))

    def format(self, value: Any) -> str:
        if not isinstance(value, datetime):
            raise MarshalError(f"dateTime expects a datetime, got {type(value).__name__}")
        text = (
            f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
            f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        )
        if value.microsecond:
            text += "." + f"{value.microsecond:06d}".rstrip("0")
        offset = value.utcoffset()
        if offset is None:
            return text
        if offset == timedelta(0):
            return text + "Z"
        total = int(offset.total_seconds()) // 60
        sign = "-" if total < 0 else "+"
        hours, minutes = divmod(abs(total), 60)
        return f"{text}{sign}{hours:02d}:{minutes:02d}"


class Base64Binary(SimpleType):
    name = "base64Binary"

    def parse(self, text: str) -> bytes:
        compact = "".join(text.split())
        try:
            return base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise LexicalError(self.name, text) from exc

    def format(self, value: Any) -> str:
        if not isinstance(value, (bytes, bytearray)):
            raise MarshalError(f"base64Binary expects bytes, got {type(value).__name__}")
        return base64.b64encode(bytes(value)).decode("ascii")


class NCName(SimpleType):
    name = "NCName"

    def parse(self, text: str) -> str:
        raw = text.strip()
        if not NCNAME_PATTERN.match(raw):
            raise LexicalError(self.name, text)
        return raw


class Id(NCName):
    name = "ID"


class IdRef(NCName):
    name = "IDREF"


class NCNameList(SimpleType):
    """Whitespace separated list of NCNames; may be empty."""

    name = "NCNameList"
    min_length = 0

    def parse(self, text: str) -> list[str]:
        items = text.split()
        if len(items) < self.min_length:
            raise LexicalError(self.name, text)
        for item in items:
            if not NCNAME_PATTERN.match(item):
                raise LexicalError(self.name, text)
        return items

    def format(self, value: Any) -> str:
        if isinstance(value, str):
            raise MarshalError(f"{self.name} expects a list of names, got a str")
        return " ".join(value)


class IdRefs(NCNameList):
    name = "IDREFS"
    min_length = 1


class Enumeration(SimpleType):
    """Closed value set backed by a ``StrEnum``."""

    def __init__(self, enum_cls: type[Enum]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__

    def parse(self, text: str) -> Enum:
        try:
            return self.enum_cls(collapse(text))
        except ValueError as exc:
            raise LexicalError(self.name, text) from exc

    def format(self, value: Any) -> str:
        try:
            member = self.enum_cls(value)
        except ValueError as exc:
            raise MarshalError(f"{value!r} is not a valid {self.name}") from exc
        return str(member.value)


STRING = String()
ANY_URI = AnyURI()
TOKEN = Token()
LANGUAGE = Language()
INTEGER = Integer()
INT = Int()
LONG = Long()
POSITIVE_INTEGER = PositiveInteger()
NON_NEGATIVE_INTEGER = NonNegativeInteger()
DECIMAL = DecimalType()
DOUBLE = Double()
DOUBLE_LIST = DoubleList()
BOOLEAN = Boolean()
DATE_TIME = DateTime()
BASE64_BINARY = Base64Binary()
NCNAME = NCName()
ID = Id()
IDREF = IdRef()
IDREFS = IdRefs()
NCNAME_LIST = NCNameList()

__all__ = [
    "ANY_URI",
    "BASE64_BINARY",
    "BOOLEAN",
    "DATE_TIME",
    "DECIMAL",
    "DOUBLE",
    "DOUBLE_LIST",
    "ID",
    "IDREF",
    "IDREFS",
    "INT",
    "INTEGER",
    "LANGUAGE",
    "LONG",
    "NCNAME",
    "NCNAME_LIST",
    "NON_NEGATIVE_INTEGER",
    "POSITIVE_INTEGER",
    "STRING",
    "TOKEN",
    "Enumeration",
    "SimpleType",
    "collapse",
]

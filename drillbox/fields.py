"""Read typed fields out of a flat ``<data>`` document."""

from __future__ import annotations

import re
from collections.abc import Iterable

Field = tuple[str, "int | str"]

_FIELD = re.compile(r'<(\S+) type="([^"]*)">([^<]*)<')


def _convert(name: str, field_type: str, raw: str) -> int | str:
    if field_type == "int":
        try:
            return int(raw.strip())
        except ValueError:
            raise ValueError(f"field {name!r} is not an integer: {raw!r}") from None
    if field_type == "string":
        return raw
    raise ValueError(f"field {name!r} has unknown type {field_type!r}")


def parse_fields(xml_data: str) -> list[Field]:
    """Parse ``<name type="int|string">value</...>`` lines inside ``<data>``.

    The opening ``<data>`` line is skipped and parsing stops at the last
    ``</data>``.
    """
    start = xml_data.find("\n") + 1
    end = xml_data.rfind("</data>")
    if end == -1:
        raise ValueError("missing closing </data> tag")
    body = xml_data[start:end]
    return [
        (match.group(1), _convert(match.group(1), match.group(2), match.group(3)))
        for match in _FIELD.finditer(body)
    ]


def format_fields(fields: Iterable[Field]) -> str:
    """Describe each field on its own line."""
    return "".join(
        f"field name:{name}, field value:{value}\n" for name, value in fields
    )
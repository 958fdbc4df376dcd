"""Rendering of field tables into PHP array rows."""

from typing import Mapping, Sequence, Union

# Row of code used in an array value declaration
ARRAY_LINE = "{indent}'{name}' => {value},{line_break}"

FieldTable = Sequence[tuple[str, str]]


def enclose_in_single_quotes(value: str) -> str:
    return "'" + value + "'"


def format_field_table(
    fields: Union[FieldTable, Mapping[str, str]],
    *,
    indent: str,
    line_break: str,
) -> str:
    """Render one array row per (name, value) pair.

    Rows come out in the order given; a mapping is rendered in insertion order.
    """
    pairs = fields.items() if isinstance(fields, Mapping) else fields
    return "".join(
        ARRAY_LINE.format(indent=indent, name=name, value=value, line_break=line_break)
        for name, value in pairs
    )

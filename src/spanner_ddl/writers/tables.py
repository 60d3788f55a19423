from __future__ import annotations
import re

from spanner_ddl.config import DEFAULT_SCHEMA_NAME
from spanner_ddl.errors import UnsupportedTypeError
from spanner_ddl.model import Field, SchemaGraph, Table
from spanner_ddl.utils import has_white_space, should_print_schema

SPANNER_TYPES = {
    "ARRAY", "STRING", "BYTES", "INT64", "JSON", "BOOL", "DATE", "TIMESTAMP",
    "STRUCT", "ENUM", "PROTO", "FLOAT32", "FLOAT64", "NUMERIC",
}

_BASE_TYPE_RE = re.compile(r"^([A-Za-z0-9_]+)")


def check_type_supported(table: Table, f: Field, graph: SchemaGraph) -> None:
    type_name = f.type.type_name
    # 사용자 정의 enum 은 통과
    if any(e.name == type_name for e in graph.enums.values()):
        return
    m = _BASE_TYPE_RE.match(type_name.strip())
    base = m.group(1).upper() if m else type_name.upper()
    if base not in SPANNER_TYPES:
        raise UnsupportedTypeError(table.name, f.name, type_name)


def render_default(f: Field) -> str:
    d = f.dbdefault
    if d.type == "expression":
        return f" DEFAULT ({d.value})"
    if d.type == "string":
        # 주석과 달리 작은따옴표 이스케이프하지 않음
        return f" DEFAULT '{d.value}'"
    if d.type == "boolean" and isinstance(d.value, bool):
        return f" DEFAULT {'true' if d.value else 'false'}"
    return f" DEFAULT {d.value}"


def get_field_lines(table_id: str, graph: SchemaGraph, validate_types: bool = False) -> list[str]:
    table = graph.table(table_id)
    lines: list[str] = []
    for field_id in table.field_ids:
        f = graph.field(field_id)
        if validate_types:
            check_type_supported(table, f, graph)

        schema_name = ""
        owner = f.type.schema_name
        if owner and owner != DEFAULT_SCHEMA_NAME:
            schema_name = f'"{owner}".' if has_white_space(owner) else f"{owner}."
        type_name = f'"{f.type.type_name}"' if has_white_space(f.type.type_name) else f.type.type_name

        line = f"{f.name} {schema_name}{type_name}"
        if f.unique:
            line += " UNIQUE"
        if f.not_null:
            line += " NOT NULL"
        if f.dbdefault is not None:
            line += render_default(f)
        lines.append(line)
    return lines


def get_composite_pks(table_id: str, graph: SchemaGraph) -> list[str]:
    table = graph.table(table_id)
    lines: list[str] = []
    for index_id in table.index_ids:
        index = graph.index(index_id)
        if not index.pk:
            continue
        cols = []
        for column_id in index.column_ids:
            column = graph.index_column(column_id)
            cols.append(f"({column.value})" if column.type == "expression" else f"{column.value}")
        lines.append(f"PRIMARY KEY ({', '.join(cols)})")
    return lines


def export_table(table_id: str, graph: SchemaGraph, validate_types: bool = False) -> str:
    table = graph.table(table_id)
    schema = graph.schema(table.schema_id)
    field_lines = get_field_lines(table_id, graph, validate_types=validate_types)
    composite_pks = get_composite_pks(table_id, graph)

    if composite_pks:
        primary_key = ", ".join(composite_pks)
    else:
        primary_key = table.primary_key or "PRIMARY KEY ()"

    prefix = f"{schema.name}." if should_print_schema(schema, graph) else ""
    body = ",\n".join(f"  {line}" for line in field_lines)
    table_str = f"CREATE TABLE {prefix}{table.name} (\n{body},\n) {primary_key}"
    table_end = f",\n{table.interleave};\n" if table.interleave else ";\n"
    return f"{table_str}{table_end}"

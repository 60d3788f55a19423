from __future__ import annotations
import re

from spanner_ddl.config import DEFAULT_SCHEMA_NAME
from spanner_ddl.model import Schema, SchemaGraph

_WS_RE = re.compile(r"\s")


def has_white_space(s: str) -> bool:
    return bool(_WS_RE.search(s))


def should_print_schema(schema: Schema, graph: SchemaGraph) -> bool:
    if schema.name != DEFAULT_SCHEMA_NAME:
        return True
    return graph.database.has_default_schema


def _junction_field_name(field_id: str, graph: SchemaGraph) -> tuple[str, str]:
    f = graph.field(field_id)
    table = graph.table(f.table_id)
    return f"{table.name}_{f.name}", f.type.type_name


def build_junction_fields_1(field_ids: list[str], graph: SchemaGraph) -> dict[str, str]:
    fields_map: dict[str, str] = {}
    for field_id in field_ids:
        name, type_name = _junction_field_name(field_id, graph)
        fields_map[name] = type_name
    return fields_map


def build_junction_fields_2(
    field_ids: list[str], graph: SchemaGraph, first_fields_map: dict[str, str]
) -> dict[str, str]:
    """첫 번째 맵의 키와 겹치면 (1), (2) ... 접미사를 붙인다."""
    fields_map: dict[str, str] = {}
    for field_id in field_ids:
        base, type_name = _junction_field_name(field_id, graph)
        name = base
        count = 1
        while name in first_fields_map:
            name = f"{base}({count})"
            count += 1
        fields_map[name] = type_name
    return fields_map


def build_new_table_name(first_table: str, second_table: str, used_table_names: set[str]) -> str:
    """
    조인 테이블 이름 생성. 이미 쓰인 이름이면 (1), (2) ... 를 붙이고,
    결정된 이름은 used_table_names 에 바로 예약한다.
    """
    base = f"{first_table}_{second_table}"
    name = base
    count = 1
    while name in used_table_names:
        name = f"{base}({count})"
        count += 1
    used_table_names.add(name)
    return name


def quote_note(note: str) -> str:
    return "'" + note.replace("'", "''") + "'"

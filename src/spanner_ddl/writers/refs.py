"""Ref(관계) → FOREIGN KEY / many-to-many 조인 테이블 DDL."""
from __future__ import annotations
from dataclasses import dataclass

from spanner_ddl.errors import StructuralError
from spanner_ddl.model import Endpoint, Ref, Schema, SchemaGraph, Table
from spanner_ddl.utils import (
    build_junction_fields_1,
    build_junction_fields_2,
    build_new_table_name,
    should_print_schema,
)

ONE = "1"


@dataclass
class ResolvedEndpoint:
    endpoint: Endpoint
    table: Table
    schema: Schema
    field_names: list[str]

    @property
    def columns(self) -> str:
        return f"({', '.join(self.field_names)})"


def resolve_endpoint(endpoint_id: str, graph: SchemaGraph) -> ResolvedEndpoint:
    endpoint = graph.endpoint(endpoint_id)
    if not endpoint.field_ids:
        raise StructuralError(f"endpoint '{endpoint_id}' has no fields")

    fields = [graph.field(fid) for fid in endpoint.field_ids]
    table_ids = {f.table_id for f in fields}
    if len(table_ids) != 1:
        raise StructuralError(
            f"endpoint '{endpoint_id}' fields span multiple tables: {sorted(table_ids)}"
        )
    table = graph.table(fields[0].table_id)
    return ResolvedEndpoint(endpoint, table, graph.schema(table.schema_id), [f.name for f in fields])


def find_one_side(ref: Ref, graph: SchemaGraph) -> int:
    """relation == '1' 인 첫 엔드포인트 위치, 없으면 -1 (many-to-many)."""
    for i, endpoint_id in enumerate(ref.endpoint_ids):
        if graph.endpoint(endpoint_id).relation == ONE:
            return i
    return -1


def _bare_prefix(schema: Schema, graph: SchemaGraph) -> str:
    return f"{schema.name}." if should_print_schema(schema, graph) else ""


def _quoted_prefix(schema: Schema, graph: SchemaGraph) -> str:
    return f'"{schema.name}".' if should_print_schema(schema, graph) else ""


def build_foreign_key(ref: Ref, referencing: ResolvedEndpoint, referenced: ResolvedEndpoint, graph: SchemaGraph) -> str:
    line = f"ALTER TABLE {_bare_prefix(referencing.schema, graph)}{referencing.table.name}\n  ADD "
    if ref.name:
        line += f"CONSTRAINT {ref.name} "
    line += (
        f"FOREIGN KEY {referencing.columns} REFERENCES "
        f"{_bare_prefix(referenced.schema, graph)}{referenced.table.name} {referenced.columns}"
    )
    if ref.on_delete:
        line += f" ON DELETE {ref.on_delete.upper()}"
    return line + ";\n"


def build_junction_table(
    first_map: dict[str, str], second_map: dict[str, str], table_name: str, schema: Schema, graph: SchemaGraph
) -> str:
    columns = [f'  "{name}" {type_name},\n' for name, type_name in first_map.items()]
    columns += [f'  "{name}" {type_name},\n' for name, type_name in second_map.items()]
    keys = ", ".join(f'"{k}"' for k in [*first_map, *second_map])
    return f'CREATE TABLE {_quoted_prefix(schema, graph)}"{table_name}" (\n{"".join(columns)}) PRIMARY KEY ({keys});\n'


def build_junction_foreign_key(
    fields_map: dict[str, str],
    junction_name: str,
    junction_schema: Schema,
    target: ResolvedEndpoint,
    graph: SchemaGraph,
) -> str:
    junction_cols = ", ".join(f'"{k}"' for k in fields_map)
    return (
        f'ALTER TABLE {_quoted_prefix(junction_schema, graph)}"{junction_name}" '
        f"ADD FOREIGN KEY ({junction_cols}) REFERENCES "
        f'{_quoted_prefix(target.schema, graph)}"{target.table.name}" {target.columns};\n'
    )


def export_ref(ref_id: str, graph: SchemaGraph, used_table_names: set[str]) -> list[str]:
    ref = graph.ref(ref_id)
    if len(ref.endpoint_ids) != 2:
        raise StructuralError(f"ref '{ref_id}' must have exactly 2 endpoints, got {len(ref.endpoint_ids)}")

    one_index = find_one_side(ref, graph)
    ref_index = 0 if one_index == -1 else one_index
    referenced = resolve_endpoint(ref.endpoint_ids[ref_index], graph)
    referencing = resolve_endpoint(ref.endpoint_ids[1 - ref_index], graph)

    if one_index != -1:
        return [build_foreign_key(ref, referencing, referenced, graph)]

    # many-to-many: 엔드포인트 선언 순서대로 조인 테이블 컬럼 구성
    first_map = build_junction_fields_1(referenced.endpoint.field_ids, graph)
    second_map = build_junction_fields_2(referencing.endpoint.field_ids, graph, first_map)
    junction_name = build_new_table_name(referenced.table.name, referencing.table.name, used_table_names)
    junction_schema = referenced.schema

    return [
        build_junction_table(first_map, second_map, junction_name, junction_schema, graph),
        build_junction_foreign_key(first_map, junction_name, junction_schema, referenced, graph),
        build_junction_foreign_key(second_map, junction_name, junction_schema, referencing, graph),
    ]


def export_refs(ref_ids: list[str], graph: SchemaGraph, used_table_names: set[str]) -> list[str]:
    statements: list[str] = []
    for ref_id in ref_ids:
        statements.extend(export_ref(ref_id, graph, used_table_names))
    return statements

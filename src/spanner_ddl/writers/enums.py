from __future__ import annotations
from spanner_ddl.model import SchemaGraph
from spanner_ddl.utils import should_print_schema


def export_enums(enum_ids: list[str], graph: SchemaGraph) -> list[str]:
    lines: list[str] = []
    for enum_id in enum_ids:
        enum = graph.enum(enum_id)
        schema = graph.schema(enum.schema_id)

        values = ",\n".join(f"  '{graph.enum_value(v).name}'" for v in enum.value_ids)
        prefix = f'"{schema.name}".' if should_print_schema(schema, graph) else ""
        lines.append(f'CREATE TYPE {prefix}"{enum.name}" AS ENUM (\n{values}\n);\n')
    return lines

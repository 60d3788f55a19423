from __future__ import annotations
from spanner_ddl.model import SchemaGraph
from spanner_ddl.utils import should_print_schema
from spanner_ddl.writers.tables import export_table


def export_index(index_id: str, graph: SchemaGraph) -> str | None:
    """composite PK 인덱스는 CREATE TABLE 에서만 출력하므로 None."""
    index = graph.index(index_id)
    if index.pk:
        return None

    table = graph.table(index.table_id)
    schema = graph.schema(table.schema_id)

    line = "CREATE"
    if index.unique:
        line += " UNIQUE"
    line += " INDEX"
    if index.name:
        line += f" {index.name}"
    prefix = f"{schema.name}." if should_print_schema(schema, graph) else ""
    line += f" ON {prefix}{table.name}"
    if index.type:
        line += f" USING {index.type.upper()}"

    cols = []
    for column_id in index.column_ids:
        column = graph.index_column(column_id)
        # 일반 컬럼은 따옴표로 감싼다 (composite PK 렌더러와 다름)
        cols.append(f"({column.value})" if column.type == "expression" else f'"{column.value}"')
    line += f" ({', '.join(cols)});"
    return line


def export_table_and_indexes(table_id: str, graph: SchemaGraph, validate_types: bool = False) -> list[str]:
    statements = [export_table(table_id, graph, validate_types=validate_types)]
    for index_id in graph.table(table_id).index_ids:
        line = export_index(index_id, graph)
        if line is not None:
            statements.append(line)
    return statements

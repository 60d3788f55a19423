"""스키마 그래프 → Cloud Spanner DDL 문서."""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional

from spanner_ddl.config import Settings, settings as default_settings
from spanner_ddl.model import SchemaGraph
from spanner_ddl.normalize import resolve_table_metadata
from spanner_ddl.utils import should_print_schema
from spanner_ddl.writers import (
    build_comment_targets,
    export_comments,
    export_enums,
    export_refs,
    export_table_and_indexes,
)

logger = logging.getLogger(__name__)

CATEGORIES = ("schemas", "enums", "tables_and_indexes", "comments", "refs")


@dataclass
class TableFailure:
    table_id: str
    table_name: str
    reason: str


@dataclass
class TableResult:
    table_id: str
    statements: list[str] = field(default_factory=list)
    failure: Optional[TableFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class ExportResult:
    statements: dict[str, list[str]] = field(default_factory=lambda: {c: [] for c in CATEGORIES})
    failures: list[TableFailure] = field(default_factory=list)

    @property
    def text(self) -> str:
        ordered: list[str] = []
        for category in CATEGORIES:
            ordered.extend(self.statements[category])
        return "\n".join(ordered)


def render_table(table_id: str, graph: SchemaGraph, validate_types: bool = False) -> TableResult:
    """
    테이블 하나(컬럼/PK/인덱스) 렌더링.
    실패해도 예외를 올리지 않고 TableResult.failure 로 돌려준다.
    """
    table = graph.table(table_id)
    try:
        statements = export_table_and_indexes(table_id, graph, validate_types=validate_types)
    except Exception as e:
        return TableResult(table_id, failure=TableFailure(table_id, table.name, str(e)))
    return TableResult(table_id, statements=statements)


def export(graph: SchemaGraph, cfg: Settings | None = None) -> ExportResult:
    cfg = cfg or default_settings
    result = ExportResult()
    buckets = result.statements

    resolve_table_metadata(graph, interleave_marker=cfg.interleave_marker)
    used_table_names = graph.used_table_names()

    for schema_id in graph.database.schema_ids:
        schema = graph.schema(schema_id)

        if should_print_schema(schema, graph):
            buckets["schemas"].append(f'CREATE SCHEMA "{schema.name}";\n')

        if schema.enum_ids:
            buckets["enums"].extend(export_enums(schema.enum_ids, graph))

        targets = build_comment_targets(schema.table_ids, graph)
        if targets:
            buckets["comments"].extend(export_comments(targets, graph, interleave_marker=cfg.interleave_marker))

        for table_id in schema.table_ids:
            table_result = render_table(table_id, graph, validate_types=cfg.validate_types)
            if table_result.ok:
                buckets["tables_and_indexes"].extend(table_result.statements)
            else:
                failure = table_result.failure
                logger.warning("Skipping table %s: %s", failure.table_name, failure.reason)
                result.failures.append(failure)

        if schema.ref_ids:
            buckets["refs"].extend(export_refs(schema.ref_ids, graph, used_table_names))

    logger.info(
        "Exported %d schema(s), %d table statement(s), %d failure(s)",
        len(graph.database.schema_ids),
        len(buckets["tables_and_indexes"]),
        len(result.failures),
    )
    return result


def export_text(graph: SchemaGraph, cfg: Settings | None = None) -> str:
    return export(graph, cfg).text

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from spanner_ddl.model import SchemaGraph
from spanner_ddl.normalize import is_interleave_note
from spanner_ddl.utils import quote_note, should_print_schema


@dataclass
class CommentTarget:
    type: Literal["table", "column"]
    table_id: str
    field_id: Optional[str] = None


def build_comment_targets(table_ids: list[str], graph: SchemaGraph) -> list[CommentTarget]:
    """테이블 note → 해당 테이블 컬럼 note 순서로 평탄화."""
    targets: list[CommentTarget] = []
    for table_id in table_ids:
        table = graph.table(table_id)
        if table.note:
            targets.append(CommentTarget("table", table_id))
        for field_id in table.field_ids:
            if graph.field(field_id).note:
                targets.append(CommentTarget("column", table_id, field_id))
    return targets


def export_comments(
    targets: list[CommentTarget], graph: SchemaGraph, interleave_marker: str | None = None
) -> list[str]:
    lines: list[str] = []
    for target in targets:
        table = graph.table(target.table_id)
        schema = graph.schema(table.schema_id)
        prefix = f'"{schema.name}".' if should_print_schema(schema, graph) else ""

        if target.type == "table":
            # INTERLEAVE 지시어는 주석이 아님 (normalize 에서 table.interleave 로 이동됨)
            if is_interleave_note(table.note, interleave_marker):
                continue
            lines.append(f'COMMENT ON TABLE {prefix}"{table.name}" IS {quote_note(table.note)};\n')
        elif target.type == "column":
            f = graph.field(target.field_id)
            lines.append(
                f'COMMENT ON COLUMN {prefix}"{table.name}"."{f.name}" IS {quote_note(f.note)};\n'
            )
    return lines

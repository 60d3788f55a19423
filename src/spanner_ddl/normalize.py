from __future__ import annotations
from spanner_ddl.config import settings
from spanner_ddl.model import SchemaGraph, Table


def is_interleave_note(note: str | None, marker: str | None = None) -> bool:
    marker = marker or settings.interleave_marker
    return bool(note) and note.startswith(marker)


def resolve_table_metadata(graph: SchemaGraph, interleave_marker: str | None = None) -> None:
    """
    렌더링 전에 모든 테이블의 메타데이터를 확정한다.
    - pk 필드가 있으면 PRIMARY KEY (<field>) 스탬프 (여러 개면 마지막 필드)
    - note 가 INTERLEAVE 지시어면 interleave 에 옮겨 둔다
    """
    for table in graph.tables.values():
        table.primary_key = None
        table.interleave = None
        _stamp_primary_key(table, graph)
        if is_interleave_note(table.note, interleave_marker):
            table.interleave = table.note


def _stamp_primary_key(table: Table, graph: SchemaGraph) -> None:
    for field_id in table.field_ids:
        f = graph.field(field_id)
        if f.pk:
            table.primary_key = f"PRIMARY KEY ({f.name})"

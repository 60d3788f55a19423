from __future__ import annotations
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from spanner_ddl.errors import GraphLoadError
from spanner_ddl.model import (
    Database, DefaultValue, Endpoint, Enum, EnumValue, Field, FieldType,
    Index, IndexColumn, Ref, Schema, SchemaGraph, Table,
)
from spanner_ddl.schema_models import NormalizedGraph

DATABASE_KEY = "1"


def to_graph(data: NormalizedGraph) -> SchemaGraph:
    db = data.database.get(DATABASE_KEY)
    if db is None:
        raise GraphLoadError(f"database entry '{DATABASE_KEY}' is missing")

    return SchemaGraph(
        database=Database(db.id, list(db.schema_ids), db.has_default_schema),
        schemas={
            k: Schema(s.id, s.name, list(s.table_ids), list(s.enum_ids), list(s.ref_ids), s.note)
            for k, s in data.schemas.items()
        },
        tables={
            k: Table(t.id, t.name, t.schema_id, list(t.field_ids), list(t.index_ids), t.note)
            for k, t in data.tables.items()
        },
        fields={
            k: Field(
                id=f.id,
                name=f.name,
                type=FieldType(f.type.type_name, f.type.schema_name),
                table_id=f.table_id,
                unique=f.unique,
                not_null=f.not_null,
                pk=f.pk,
                dbdefault=DefaultValue(f.dbdefault.type, f.dbdefault.value) if f.dbdefault else None,
                note=f.note,
            )
            for k, f in data.fields.items()
        },
        indexes={
            k: Index(i.id, i.table_id, list(i.column_ids), i.name, i.type, i.unique, i.pk)
            for k, i in data.indexes.items()
        },
        index_columns={
            k: IndexColumn(c.id, c.index_id, c.type, c.value) for k, c in data.index_columns.items()
        },
        refs={
            k: Ref(r.id, list(r.endpoint_ids), r.name, r.on_delete, r.schema_id)
            for k, r in data.refs.items()
        },
        endpoints={
            k: Endpoint(e.id, e.ref_id, list(e.field_ids), e.relation) for k, e in data.endpoints.items()
        },
        enums={k: Enum(e.id, e.name, e.schema_id, list(e.value_ids)) for k, e in data.enums.items()},
        enum_values={k: EnumValue(v.id, v.name, v.enum_id) for k, v in data.enum_values.items()},
    )


def graph_from_dict(data: dict[str, Any]) -> SchemaGraph:
    try:
        parsed = NormalizedGraph.model_validate(data)
    except ValidationError as e:
        raise GraphLoadError(f"invalid schema graph: {e}") from e
    return to_graph(parsed)


def load_graph(path: Path) -> SchemaGraph:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GraphLoadError(f"{path}: cannot read ({e})") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphLoadError(f"{path}: not valid JSON ({e})") from e
    if not isinstance(data, dict):
        raise GraphLoadError(f"{path}: top-level JSON must be an object")
    return graph_from_dict(data)

"""Shared pytest fixtures: a small builder for schema graphs."""
import itertools

import pytest

from spanner_ddl.model import (
    Database, DefaultValue, Endpoint, Enum, EnumValue, Field, FieldType,
    Index, IndexColumn, Ref, Schema, SchemaGraph, Table,
)


class GraphBuilder:
    def __init__(self, has_default_schema=False):
        self.graph = SchemaGraph(database=Database("1", has_default_schema=has_default_schema))
        self._seq = itertools.count(1)

    def _id(self):
        return str(next(self._seq))

    def schema(self, name="public"):
        s = Schema(self._id(), name)
        self.graph.schemas[s.id] = s
        self.graph.database.schema_ids.append(s.id)
        return s

    def table(self, schema, name, note=None):
        t = Table(self._id(), name, schema.id, note=note)
        self.graph.tables[t.id] = t
        schema.table_ids.append(t.id)
        return t

    def field(self, table, name, type_name="INT64", type_schema=None, default=None, **flags):
        dbdefault = DefaultValue(*default) if default else None
        f = Field(self._id(), name, FieldType(type_name, type_schema), table.id, dbdefault=dbdefault, **flags)
        self.graph.fields[f.id] = f
        table.field_ids.append(f.id)
        return f

    def index(self, table, columns, **kwargs):
        idx = Index(self._id(), table.id, **kwargs)
        for col in columns:
            kind, value = col if isinstance(col, tuple) else ("column", col)
            c = IndexColumn(self._id(), idx.id, kind, value)
            self.graph.index_columns[c.id] = c
            idx.column_ids.append(c.id)
        self.graph.indexes[idx.id] = idx
        table.index_ids.append(idx.id)
        return idx

    def enum(self, schema, name, values):
        e = Enum(self._id(), name, schema.id)
        for v in values:
            ev = EnumValue(self._id(), v, e.id)
            self.graph.enum_values[ev.id] = ev
            e.value_ids.append(ev.id)
        self.graph.enums[e.id] = e
        schema.enum_ids.append(e.id)
        return e

    def ref(self, schema, first, second, name=None, on_delete=None):
        """first/second: (fields, relation)"""
        r = Ref(self._id(), name=name, on_delete=on_delete, schema_id=schema.id)
        for fields, relation in (first, second):
            ep = Endpoint(self._id(), r.id, [f.id for f in fields], relation)
            self.graph.endpoints[ep.id] = ep
            r.endpoint_ids.append(ep.id)
        self.graph.refs[r.id] = r
        schema.ref_ids.append(r.id)
        return r


@pytest.fixture
def builder():
    return GraphBuilder()


@pytest.fixture
def graph_json():
    """Normalized graph in the parser's camelCase JSON shape (numeric ids)."""
    return {
        "database": {"1": {"id": 1, "schemaIds": [1], "hasDefaultSchema": False}},
        "schemas": {"1": {"id": 1, "name": "public", "tableIds": [1, 2], "enumIds": [1], "refIds": [1]}},
        "enums": {"1": {"id": 1, "name": "status", "schemaId": 1, "valueIds": [1, 2]}},
        "enumValues": {
            "1": {"id": 1, "name": "active", "enumId": 1},
            "2": {"id": 2, "name": "banned", "enumId": 1},
        },
        "tables": {
            "1": {"id": 1, "name": "users", "schemaId": 1, "fieldIds": [1, 2], "indexIds": [1], "note": "It's fine"},
            "2": {"id": 2, "name": "posts", "schemaId": 1, "fieldIds": [3, 4], "indexIds": []},
        },
        "fields": {
            "1": {"id": 1, "name": "id", "tableId": 1, "type": {"type_name": "INT64"}, "pk": True, "not_null": True},
            "2": {
                "id": 2, "name": "email", "tableId": 1, "type": {"type_name": "STRING(255)"},
                "unique": True, "note": "login",
            },
            "3": {"id": 3, "name": "id", "tableId": 2, "type": {"type_name": "INT64"}, "pk": True},
            "4": {
                "id": 4, "name": "user_id", "tableId": 2, "type": {"type_name": "INT64"},
                "dbdefault": {"type": "number", "value": 0},
            },
        },
        "indexes": {"1": {"id": 1, "tableId": 1, "columnIds": [1], "name": "idx_email", "unique": True}},
        "indexColumns": {"1": {"id": 1, "indexId": 1, "type": "column", "value": "email"}},
        "refs": {"1": {"id": 1, "endpointIds": [1, 2], "schemaId": 1, "onDelete": "cascade"}},
        "endpoints": {
            "1": {"id": 1, "refId": 1, "fieldIds": [4], "relation": "*"},
            "2": {"id": 2, "refId": 1, "fieldIds": [1], "relation": "1"},
        },
    }


@pytest.fixture
def make_builder():
    return GraphBuilder

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, List, Any

from spanner_ddl.errors import MissingReferenceError

@dataclass
class Database:
    id: str
    schema_ids: List[str] = field(default_factory=list)
    has_default_schema: bool = False

@dataclass
class Schema:
    id: str
    name: str
    table_ids: List[str] = field(default_factory=list)
    enum_ids: List[str] = field(default_factory=list)
    ref_ids: List[str] = field(default_factory=list)
    note: Optional[str] = None

@dataclass
class FieldType:
    type_name: str
    schema_name: Optional[str] = None

@dataclass
class DefaultValue:
    type: str            # expression / string / number / boolean
    value: Any

@dataclass
class Field:
    id: str
    name: str
    type: FieldType
    table_id: str
    unique: bool = False
    not_null: bool = False
    pk: bool = False
    dbdefault: Optional[DefaultValue] = None
    note: Optional[str] = None

@dataclass
class Table:
    id: str
    name: str
    schema_id: str
    field_ids: List[str] = field(default_factory=list)
    index_ids: List[str] = field(default_factory=list)
    note: Optional[str] = None
    # normalize.resolve_table_metadata 에서 채움
    primary_key: Optional[str] = None
    interleave: Optional[str] = None

@dataclass
class IndexColumn:
    id: str
    index_id: str
    type: str            # column / expression / string
    value: str

@dataclass
class Index:
    id: str
    table_id: str
    column_ids: List[str] = field(default_factory=list)
    name: Optional[str] = None
    type: Optional[str] = None
    unique: bool = False
    pk: bool = False

@dataclass
class Endpoint:
    id: str
    ref_id: str
    field_ids: List[str] = field(default_factory=list)
    relation: str = "*"

@dataclass
class Ref:
    id: str
    endpoint_ids: List[str] = field(default_factory=list)
    name: Optional[str] = None
    on_delete: Optional[str] = None
    schema_id: Optional[str] = None

@dataclass
class EnumValue:
    id: str
    name: str
    enum_id: str

@dataclass
class Enum:
    id: str
    name: str
    schema_id: str
    value_ids: List[str] = field(default_factory=list)


@dataclass
class SchemaGraph:
    """
    파서가 만든 정규화 스키마 그래프.
    엔티티는 모두 ID로 참조하며 중첩 소유하지 않는다.
    """
    database: Database
    schemas: Dict[str, Schema] = field(default_factory=dict)
    tables: Dict[str, Table] = field(default_factory=dict)
    fields: Dict[str, Field] = field(default_factory=dict)
    indexes: Dict[str, Index] = field(default_factory=dict)
    index_columns: Dict[str, IndexColumn] = field(default_factory=dict)
    refs: Dict[str, Ref] = field(default_factory=dict)
    endpoints: Dict[str, Endpoint] = field(default_factory=dict)
    enums: Dict[str, Enum] = field(default_factory=dict)
    enum_values: Dict[str, EnumValue] = field(default_factory=dict)

    def _get(self, kind: str, mapping: dict, key: str):
        try:
            return mapping[key]
        except KeyError:
            raise MissingReferenceError(kind, key) from None

    def schema(self, schema_id: str) -> Schema:
        return self._get("schema", self.schemas, schema_id)

    def table(self, table_id: str) -> Table:
        return self._get("table", self.tables, table_id)

    def field(self, field_id: str) -> Field:
        return self._get("field", self.fields, field_id)

    def index(self, index_id: str) -> Index:
        return self._get("index", self.indexes, index_id)

    def index_column(self, column_id: str) -> IndexColumn:
        return self._get("index column", self.index_columns, column_id)

    def ref(self, ref_id: str) -> Ref:
        return self._get("ref", self.refs, ref_id)

    def endpoint(self, endpoint_id: str) -> Endpoint:
        return self._get("endpoint", self.endpoints, endpoint_id)

    def enum(self, enum_id: str) -> Enum:
        return self._get("enum", self.enums, enum_id)

    def enum_value(self, value_id: str) -> EnumValue:
        return self._get("enum value", self.enum_values, value_id)

    def table_schema(self, table: Table) -> Schema:
        return self.schema(table.schema_id)

    def field_table(self, field_id: str) -> Table:
        return self.table(self.field(field_id).table_id)

    def used_table_names(self) -> set[str]:
        return {t.name for t in self.tables.values()}

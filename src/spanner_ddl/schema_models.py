"""파서가 내보내는 정규화 스키마 JSON Pydantic 모델 (camelCase 키)."""
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class _Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    id: str


class DatabaseModel(_Node):
    schema_ids: List[str] = Field(default_factory=list, alias="schemaIds")
    has_default_schema: bool = Field(default=False, alias="hasDefaultSchema")


class SchemaModel(_Node):
    name: str
    note: Optional[str] = None
    table_ids: List[str] = Field(default_factory=list, alias="tableIds")
    enum_ids: List[str] = Field(default_factory=list, alias="enumIds")
    ref_ids: List[str] = Field(default_factory=list, alias="refIds")


class FieldTypeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type_name: str
    schema_name: Optional[str] = Field(default=None, alias="schemaName")


class DefaultModel(BaseModel):
    type: str
    value: Any


class FieldModel(_Node):
    name: str
    type: FieldTypeModel
    table_id: str = Field(alias="tableId")
    unique: bool = False
    not_null: bool = False
    pk: bool = False
    dbdefault: Optional[DefaultModel] = None
    note: Optional[str] = None


class TableModel(_Node):
    name: str
    schema_id: str = Field(alias="schemaId")
    field_ids: List[str] = Field(default_factory=list, alias="fieldIds")
    index_ids: List[str] = Field(default_factory=list, alias="indexIds")
    note: Optional[str] = None


class IndexModel(_Node):
    table_id: str = Field(alias="tableId")
    column_ids: List[str] = Field(default_factory=list, alias="columnIds")
    name: Optional[str] = None
    type: Optional[str] = None
    unique: bool = False
    pk: bool = False


class IndexColumnModel(_Node):
    index_id: str = Field(alias="indexId")
    type: str = "column"
    value: str


class RefModel(_Node):
    endpoint_ids: List[str] = Field(default_factory=list, alias="endpointIds")
    name: Optional[str] = None
    on_delete: Optional[str] = Field(default=None, alias="onDelete")
    schema_id: Optional[str] = Field(default=None, alias="schemaId")


class EndpointModel(_Node):
    ref_id: str = Field(alias="refId")
    field_ids: List[str] = Field(default_factory=list, alias="fieldIds")
    relation: str = "*"


class EnumModel(_Node):
    name: str
    schema_id: str = Field(alias="schemaId")
    value_ids: List[str] = Field(default_factory=list, alias="valueIds")


class EnumValueModel(_Node):
    name: str
    enum_id: str = Field(alias="enumId")


class NormalizedGraph(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    database: Dict[str, DatabaseModel]
    schemas: Dict[str, SchemaModel] = Field(default_factory=dict)
    tables: Dict[str, TableModel] = Field(default_factory=dict)
    fields: Dict[str, FieldModel] = Field(default_factory=dict)
    indexes: Dict[str, IndexModel] = Field(default_factory=dict)
    index_columns: Dict[str, IndexColumnModel] = Field(default_factory=dict, alias="indexColumns")
    refs: Dict[str, RefModel] = Field(default_factory=dict)
    endpoints: Dict[str, EndpointModel] = Field(default_factory=dict)
    enums: Dict[str, EnumModel] = Field(default_factory=dict)
    enum_values: Dict[str, EnumValueModel] = Field(default_factory=dict, alias="enumValues")

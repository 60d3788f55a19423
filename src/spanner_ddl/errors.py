"""Export 단계 예외 정의."""
from __future__ import annotations


class ExportError(Exception):
    pass


class GraphLoadError(ExportError):
    """입력 JSON이 스키마 그래프 형식에 맞지 않을 때."""


class MissingReferenceError(ExportError, KeyError):
    def __init__(self, kind: str, ref_id: str):
        self.kind = kind
        self.ref_id = ref_id
        super().__init__(f"{kind} '{ref_id}' not found in schema graph")

    def __str__(self) -> str:
        return self.args[0]


class StructuralError(ExportError, ValueError):
    """Ref/Endpoint 구조가 잘못된 경우 (엔드포인트 2개 아님, 여러 테이블에 걸친 필드 등)."""


class UnsupportedTypeError(ExportError):
    def __init__(self, table: str, column: str, type_name: str):
        self.table = table
        self.column = column
        self.type_name = type_name
        super().__init__(f"Type {type_name} ({table}.{column}) is not supported in Spanner")

"""정규화 스키마 그래프 → Cloud Spanner DDL."""
from spanner_ddl.exporter import ExportResult, TableFailure, export, export_text
from spanner_ddl.loader import graph_from_dict, load_graph

__all__ = ["ExportResult", "TableFailure", "export", "export_text", "graph_from_dict", "load_graph"]

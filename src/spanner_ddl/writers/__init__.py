from spanner_ddl.writers.enums import export_enums
from spanner_ddl.writers.tables import export_table, get_field_lines, get_composite_pks
from spanner_ddl.writers.indexes import export_index, export_table_and_indexes
from spanner_ddl.writers.comments import CommentTarget, build_comment_targets, export_comments
from spanner_ddl.writers.refs import export_refs

__all__ = [
    "export_enums",
    "export_table",
    "get_field_lines",
    "get_composite_pks",
    "export_index",
    "export_table_and_indexes",
    "CommentTarget",
    "build_comment_targets",
    "export_comments",
    "export_refs",
]

"""Tests for CREATE INDEX rendering."""
from spanner_ddl.normalize import resolve_table_metadata
from spanner_ddl.writers.indexes import export_index, export_table_and_indexes


class TestExportIndex:
    def test_unique_named_with_method(self, builder):
        s = builder.schema()
        t = builder.table(s, "users")
        idx = builder.index(t, ["email"], name="idx_email", unique=True, type="hash")
        assert export_index(idx.id, builder.graph) == 'CREATE UNIQUE INDEX idx_email ON users USING HASH ("email");'

    def test_unnamed_index_with_expression(self, builder):
        s = builder.schema()
        t = builder.table(s, "users")
        idx = builder.index(t, ["a", ("expression", "lower(b)")])
        assert export_index(idx.id, builder.graph) == 'CREATE INDEX ON users ("a", (lower(b)));'

    def test_plain_columns_quoted_unlike_composite_pk(self, builder):
        s = builder.schema()
        t = builder.table(s, "t")
        idx = builder.index(t, ["a", "b"])
        assert '("a", "b")' in export_index(idx.id, builder.graph)

    def test_schema_qualified(self, builder):
        s = builder.schema("sales")
        t = builder.table(s, "orders")
        idx = builder.index(t, ["total"])
        assert export_index(idx.id, builder.graph) == 'CREATE INDEX ON sales.orders ("total");'

    def test_pk_index_skipped(self, builder):
        s = builder.schema()
        t = builder.table(s, "t")
        idx = builder.index(t, ["a", "b"], pk=True)
        assert export_index(idx.id, builder.graph) is None


def test_table_followed_by_its_indexes(builder):
    s = builder.schema()
    t = builder.table(s, "t")
    builder.field(t, "a")
    builder.field(t, "b")
    builder.index(t, ["a", "b"], pk=True)
    builder.index(t, ["b"], name="idx_b")
    resolve_table_metadata(builder.graph)

    statements = export_table_and_indexes(t.id, builder.graph)

    assert len(statements) == 2
    assert statements[0].startswith("CREATE TABLE t (")
    assert statements[0].count("PRIMARY KEY (a, b)") == 1
    assert statements[1] == 'CREATE INDEX idx_b ON t ("b");'

"""Unit tests for quick action query generation."""

from types import SimpleNamespace

from querylens.lib.sql import generate_quick_action_query


class TestGenerateQuickActionQuery:
    """Tests for generate_quick_action_query."""

    def test_sample(self):
        assert generate_quick_action_query("orders", "sample") == "SELECT * FROM orders LIMIT 100"

    def test_count(self):
        assert generate_quick_action_query("orders", "count") == "SELECT COUNT(*) as row_count FROM orders"

    def test_stats_without_columns(self):
        assert generate_quick_action_query("orders", "stats") == "SELECT COUNT(*) as total_rows FROM orders"
        assert generate_quick_action_query("orders", "stats", []) == "SELECT COUNT(*) as total_rows FROM orders"

    def test_stats_with_columns(self):
        """Test the exact layout of the column statistics query."""
        query = generate_quick_action_query("public.orders", "stats", ["id", "status"])
        assert query == (
            "SELECT\n"
            "  COUNT(*) as total_rows,\n"
            "          COUNT(id) as id_count,\n"
            "          COUNT(DISTINCT id) as id_distinct,\n"
            "          COUNT(status) as status_count,\n"
            "          COUNT(DISTINCT status) as status_distinct\n"
            "FROM public.orders"
        )

    def test_stats_uses_first_ten_columns_only(self):
        columns = [f"c{i}" for i in range(15)]
        query = generate_quick_action_query("t", "stats", columns)
        assert "COUNT(c9) as c9_count" in query
        assert "c10" not in query
        assert query.count("COUNT(DISTINCT") == 10

    def test_stats_accepts_column_descriptors(self):
        """Test columns given as mappings or objects with a name."""
        query = generate_quick_action_query("t", "stats", [{"name": "a"}, SimpleNamespace(name="b")])
        assert "COUNT(a) as a_count" in query
        assert "COUNT(DISTINCT b) as b_distinct" in query

    def test_unknown_action_falls_back_to_sample(self):
        assert generate_quick_action_query("orders", "explode") == "SELECT * FROM orders LIMIT 100"

    def test_output_has_no_placeholders(self):
        from querylens.lib.sql import detect_parameters

        for action in ("sample", "count", "stats"):
            assert detect_parameters(generate_quick_action_query("t", action, ["a"])) == []

    def test_stats_skips_columns_without_a_name(self):
        """Test that unresolvable column entries are skipped instead of failing."""
        query = generate_quick_action_query("t", "stats", [{"label": "a"}, object(), {"name": None}, "b", ""])
        assert "COUNT(b) as b_count" in query
        assert query.count("COUNT(DISTINCT") == 1

    def test_stats_with_only_unusable_columns(self):
        assert generate_quick_action_query("t", "stats", [{"label": "a"}]) == "SELECT COUNT(*) as total_rows FROM t"
        assert generate_quick_action_query("t", "stats", 5) == "SELECT COUNT(*) as total_rows FROM t"

    def test_stats_single_string_is_one_column(self):
        """Test that a bare string is treated as one column, not split into characters."""
        query = generate_quick_action_query("t", "stats", "abc")
        assert "COUNT(abc) as abc_count" in query
        assert query.count("COUNT(DISTINCT") == 1

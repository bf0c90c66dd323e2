"""Unit tests for table to saved query association."""

from types import SimpleNamespace

from querylens.lib.sql import find_queries_for_table, get_query_text, query_references_table
from querylens.models.query_models import SavedQueryRecord


class TestQueryReferencesTable:
    """Tests for query_references_table."""

    def test_schema_agnostic_match(self):
        """Test that public.users matches a search for users."""
        assert query_references_table("SELECT * FROM public.users", "users") is True

    def test_search_with_schema_matches_bare_reference(self):
        assert query_references_table("SELECT * FROM users", "public.users") is True

    def test_case_insensitive(self):
        assert query_references_table("SELECT * FROM Orders", "ORDERS") is True

    def test_no_match(self):
        assert query_references_table("SELECT * FROM users", "orders") is False

    def test_partial_names_do_not_match(self):
        assert query_references_table("SELECT * FROM users_archive", "users") is False

    def test_invalid_inputs(self):
        assert query_references_table(None, "users") is False
        assert query_references_table("SELECT * FROM users", "") is False
        assert query_references_table("SELECT * FROM users", None) is False


class TestFindQueriesForTable:
    """Tests for find_queries_for_table."""

    def test_filters_dict_records_by_any_text_field(self):
        """Test that query, sql and content fields are all consulted."""
        records = [
            {"id": 1, "query": "SELECT * FROM users"},
            {"id": 2, "sql": "SELECT * FROM orders o JOIN users u ON u.id = o.user_id"},
            {"id": 3, "content": "SELECT * FROM products"},
            {"id": 4, "content": "DELETE FROM public.users WHERE id = :id"},
        ]
        result = find_queries_for_table(records, "users")
        assert [r["id"] for r in result] == [1, 2, 4]

    def test_records_are_returned_unchanged(self):
        record = {"id": 1, "query": "SELECT * FROM users", "owner": "ana"}
        assert find_queries_for_table([record], "users")[0] is record

    def test_model_and_object_records(self):
        """Test pydantic records and plain objects."""
        model = SavedQueryRecord(id="a", sql="SELECT * FROM users")
        obj = SimpleNamespace(query=None, sql=None, content="UPDATE users SET x = 1")
        other = SimpleNamespace(query="SELECT 1")
        assert find_queries_for_table([model, obj, other], "users") == [model, obj]

    def test_records_without_text_are_skipped(self):
        assert find_queries_for_table([{"id": 1}], "users") == []

    def test_empty_inputs(self):
        assert find_queries_for_table([], "users") == []
        assert find_queries_for_table(None, "users") == []
        assert find_queries_for_table([{"query": "SELECT * FROM users"}], "") == []


class TestGetQueryText:
    """Tests for get_query_text."""

    def test_field_priority(self):
        record = {"query": "", "sql": "SELECT 2", "content": "SELECT 3"}
        assert get_query_text(record) == "SELECT 2"

    def test_missing_text(self):
        assert get_query_text({}) is None
        assert get_query_text(object()) is None

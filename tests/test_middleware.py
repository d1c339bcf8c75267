"""
Tests for request logging middleware helpers
"""

import pytest

from bookcatalog.middleware import operation_name_from_payload, sanitize_query_params


@pytest.mark.unit
class TestSanitizeQueryParams:
    def test_redacts_sensitive_keys(self):
        params = {"token": "abc", "API_KEY": "xyz", "page": "2"}

        assert sanitize_query_params(params) == {
            "token": "[REDACTED]",
            "API_KEY": "[REDACTED]",
            "page": "2",
        }

    def test_redacts_partial_matches(self):
        assert sanitize_query_params({"user_password": "p"}) == {"user_password": "[REDACTED]"}

    def test_empty(self):
        assert sanitize_query_params({}) == {}


@pytest.mark.unit
class TestOperationNameFromPayload:
    def test_explicit_operation_name(self):
        assert operation_name_from_payload({"operationName": "AllBooks"}) == "AllBooks"

    def test_named_query(self):
        payload = {"query": "query AllBooks { books { id } }"}

        assert operation_name_from_payload(payload) == "AllBooks"

    def test_named_mutation(self):
        payload = {"query": 'mutation AddBook { addBook(title: "X", author: "Y") { id } }'}

        assert operation_name_from_payload(payload) == "mutation:AddBook"

    def test_unnamed_operation(self):
        assert operation_name_from_payload({"query": "{ books { id } }"}) == "unnamed_operation"

    def test_introspection(self):
        payload = {"query": "query IntrospectionQuery { __schema { types { name } } }"}

        assert operation_name_from_payload(payload) == "__introspection"

    def test_missing_query(self):
        assert operation_name_from_payload({}) is None
        assert operation_name_from_payload({"query": 42}) is None

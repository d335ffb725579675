"""
Unit tests for request logging helpers
"""

import pytest

from registrar.logging import (
    RequestContextFilter,
    clear_request_context,
    set_graphql_operation,
    set_request_context,
)
from registrar.middleware import operation_name_from_payload, sanitize_query_params


class TestSanitizeQueryParams:
    @pytest.mark.unit
    def test_redacts_sensitive_and_graphql_params(self):
        params = {
            "api_token": "abc",
            "page": "2",
            "query": "{ students { id } }",
            "variables": "{}",
        }

        assert sanitize_query_params(params) == {
            "api_token": "[REDACTED]",
            "page": "2",
            "query": "[REDACTED]",
            "variables": "[REDACTED]",
        }


class TestOperationName:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ({"operationName": "GetStudents", "query": "query X { a }"}, "GetStudents"),
            ({"query": "query Roster { students { id } }"}, "Roster"),
            ({"query": "mutation Enroll { enroll(id: 1) { id } }"}, "mutation:Enroll"),
            ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
            ({"query": "{ students { id } }"}, "unnamed_operation"),
            ({}, "unnamed_operation"),
        ],
    )
    def test_operation_name(self, payload, expected):
        assert operation_name_from_payload(payload) == expected


class TestRequestContextFilter:
    @pytest.mark.unit
    def test_adds_request_id_and_operation(self):
        set_request_context("req-123")
        set_graphql_operation("mutation:Enroll")
        try:
            event = RequestContextFilter()(None, "info", {"event": "Student enrolled"})
        finally:
            clear_request_context()

        assert event == {
            "event": "Student enrolled",
            "request_id": "req-123",
            "graphql_operation": "mutation:Enroll",
        }

    @pytest.mark.unit
    def test_cleared_context_adds_nothing(self):
        set_request_context("req-123")
        set_graphql_operation("Roster")
        clear_request_context()

        event = RequestContextFilter()(None, "info", {"event": "Server ready"})

        assert event == {"event": "Server ready"}

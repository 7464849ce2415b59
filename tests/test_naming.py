"""Tests for apidocgen.naming -- identifier synthesis."""

from __future__ import annotations

import pytest

from apidocgen.models import Endpoint
from apidocgen.naming import (
    function_name,
    item_type_name,
    method_prefix,
    mutation_hook_name,
    params_type_name,
    query_hook_name,
    query_key,
    request_type_name,
    response_type_name,
    to_camel_case,
    to_identifier,
    to_pascal_case,
)


def _endpoint(name: str, method: str = "GET") -> Endpoint:
    return Endpoint(id="x", name=name, method=method, path="/x")


class TestCaseConversion:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("get user list", "GetUserList"),
            ("user-profile_v2", "UserProfileV2"),
            ("USERS", "Users"),
            ("  spaced   out  ", "SpacedOut"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_pascal_case(self, raw, expected: str) -> None:
        assert to_pascal_case(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Get User List", "getUserList"),
            ("user-id", "userId"),
            ("ID", "id"),
            ("!!!", ""),
        ],
    )
    def test_camel_case(self, raw: str, expected: str) -> None:
        assert to_camel_case(raw) == expected


class TestMethodPrefix:
    @pytest.mark.parametrize(
        ("method", "prefix"),
        [
            ("GET", "get"),
            ("POST", "create"),
            ("PUT", "update"),
            ("PATCH", "patch"),
            ("DELETE", "delete"),
            ("HEAD", "head"),
            ("OPTIONS", "options"),
        ],
    )
    def test_prefix(self, method: str, prefix: str) -> None:
        assert method_prefix(method) == prefix


class TestFunctionName:
    def test_prefix_plus_pascal_name(self) -> None:
        assert function_name(_endpoint("user list")) == "getUserList"
        assert function_name(_endpoint("user", "POST")) == "createUser"

    def test_prefix_is_not_deduplicated(self) -> None:
        assert function_name(_endpoint("Get Users")) == "getGetUsers"

    def test_type_and_hook_names_share_the_base(self) -> None:
        endpoint = _endpoint("get user list")
        assert params_type_name(endpoint) == "GetUserListParams"
        assert request_type_name(endpoint) == "GetUserListRequest"
        assert response_type_name(endpoint) == "GetUserListResponse"
        assert item_type_name(endpoint) == "GetUserListItem"
        assert query_hook_name(endpoint) == "useGetUserList"
        assert mutation_hook_name(endpoint) == "useGetUserListMutation"


class TestQueryKey:
    def test_each_non_alphanumeric_becomes_hyphen(self) -> None:
        assert query_key(_endpoint("Get Users")) == "get-users"
        assert query_key(_endpoint("a  b!")) == "a--b-"


class TestToIdentifier:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("userId", "userId"),
            ("user_id", "user_id"),
            ("user-id", "userId"),
            ("2fa", "_2fa"),
            ("delete", "delete_"),
            ("", "param"),
        ],
    )
    def test_identifier(self, name: str, expected: str) -> None:
        assert to_identifier(name) == expected

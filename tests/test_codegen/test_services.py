"""Tests for apidocgen.codegen.services -- service functions and the driver."""

from __future__ import annotations

import re
from typing import Any

import pytest

from apidocgen.codegen import generate_services
from apidocgen.codegen.services import generate_service
from apidocgen.models import APIDocumentation, Endpoint, GeneratorConfig


def _service(result, function_name: str):
    return next(s for s in result.services if s.function_name == function_name)


@pytest.fixture
def users_result(users_api: APIDocumentation):
    return generate_services(users_api)


class TestScenarioA:
    def test_signature_and_types(self, scenario_a_raw: dict[str, Any]) -> None:
        result = generate_services(scenario_a_raw)
        assert result.total_functions == 1
        service = result.services[0]
        assert service.function_name == "getGetUsers"
        assert (
            "export const getGetUsers = async (params?: GetUsersParams, config?: RequestConfig)"
            ": Promise<APIResponse<GetUsersResponse>> =>"
        ) in service.code
        assert "export type GetUsersResponse = GetUsersItem[];" in service.types


class TestServiceShape:
    def test_one_service_per_endpoint_in_order(self, users_result) -> None:
        assert [s.function_name for s in users_result.services] == [
            "getGetUsers",
            "getUserById",
            "createUser",
            "deleteUserRecord",
            "headUsersStatus",
        ]
        assert users_result.total_functions == 5

    def test_get_with_query_forwards_params(self, users_result) -> None:
        code = _service(users_result, "getGetUsers").code
        assert "const response = await apiClient.get<GetUsersResponse>(`/users`, params, config);" in code

    def test_path_parameter_substitution(self, users_result) -> None:
        code = _service(users_result, "getUserById").code
        assert "async (userId: string, config?: RequestConfig)" in code
        assert "apiClient.get<UserByIdResponse>(`/users/${userId}`, undefined, config)" in code

    def test_post_sends_body(self, users_result) -> None:
        code = _service(users_result, "createUser").code
        assert "async (data: UserRequest, config?: RequestConfig)" in code
        assert "apiClient.post<UserResponse>(`/users`, data, config)" in code

    def test_delete_has_no_body_argument(self, users_result) -> None:
        code = _service(users_result, "deleteUserRecord").code
        assert "apiClient.delete<UserRecordResponse>(`/users/${userId}`, config)" in code

    def test_other_methods_use_generic_request(self, users_result) -> None:
        code = _service(users_result, "headUsersStatus").code
        assert "async (config?: RequestConfig)" in code
        assert (
            "apiClient.request<UsersStatusResponse>({ method: 'HEAD', url: `/users`, ...config })"
        ) in code

    def test_errors_are_rethrown(self, users_result) -> None:
        code = _service(users_result, "getGetUsers").code
        assert "} catch (error) {\n    throw error;\n  }" in code

    def test_jsdoc(self, users_result) -> None:
        code = _service(users_result, "getUserById").code
        assert code.startswith(
            "/**\n"
            " * Get one user\n"
            " * Returns a single user\n"
            " * @param userId User id\n"
            " * @param config Request configuration\n"
            " * @returns Promise<APIResponse<UserByIdResponse>>\n"
            " */\n"
        )

    def test_code_has_no_trailing_newline(self, users_result) -> None:
        assert all(not s.code.endswith("\n") for s in users_result.services)

    def test_imports(self, users_result) -> None:
        assert _service(users_result, "getUserById").imports == [
            "import type { RequestConfig } from '@/lib/api-client';",
            "import { apiClient } from '@/lib/api-client-factory';",
            "import type { APIResponse, UserByIdResponse } from './types';",
        ]

    def test_service_carries_its_endpoint_and_types(self, users_result) -> None:
        service = _service(users_result, "createUser")
        assert service.name == "user"
        assert service.endpoint.id == "create-user"
        assert service.types[0].startswith("export interface UserRequest {")


class TestSignatures:
    def _code(self, **endpoint: Any) -> str:
        data = {"id": "x", "name": "thing", "method": "GET", "path": "/things"}
        data.update(endpoint)
        return generate_service(Endpoint.model_validate(data), GeneratorConfig()).code

    def test_parameter_order(self) -> None:
        code = self._code(
            method="PATCH",
            path="/orgs/{org-id}/things/{thingId}",
            parameters=[
                {"name": "q", "in": "query", "type": "string"},
                {"name": "org-id", "in": "path", "type": "string", "required": True},
                {"name": "thingId", "in": "path", "type": "number", "required": True},
                {"name": "X-Trace", "in": "header", "type": "string"},
            ],
            requestBody={"contentType": "application/json", "schema": {"type": "object"}},
        )
        assert (
            "async (orgId: string, thingId: number, params: ThingParams | undefined, "
            "data: ThingRequest, config?: RequestConfig)"
        ) in code
        assert "apiClient.patch<ThingResponse>(`/orgs/${orgId}/things/${thingId}`, data, config)" in code
        assert "X-Trace" not in code

    def test_put_without_body_sends_undefined(self) -> None:
        code = self._code(method="PUT")
        assert "apiClient.put<ThingResponse>(`/things`, undefined, config)" in code

    def test_query_params_not_forwarded_by_writes(self) -> None:
        code = self._code(
            method="POST",
            parameters=[{"name": "dryRun", "in": "query", "type": "boolean"}],
        )
        assert "params?: ThingParams" in code
        assert "apiClient.post<ThingResponse>(`/things`, undefined, config)" in code

    def test_enum_path_parameter_type(self) -> None:
        code = self._code(
            path="/things/{kind}",
            parameters=[
                {"name": "kind", "in": "path", "type": "string", "enum": ["a", "b"], "required": True}
            ],
        )
        assert "async (kind: 'a' | 'b', config?: RequestConfig)" in code

    def test_deprecated_endpoint(self) -> None:
        code = self._code(deprecated=True)
        assert " * @deprecated This endpoint is deprecated\n" in code

    def test_jsdoc_terminator_is_escaped(self) -> None:
        code = self._code(summary="Closes */ early")
        assert " * Closes *\\/ early\n" in code


class TestConfiguration:
    def test_custom_client(self, users_api: APIDocumentation) -> None:
        config = GeneratorConfig(
            client_name="http",
            client_import="~/client",
            client_factory_import="~/client/factory",
        )
        result = generate_services(users_api, config)
        assert "http.get<GetUsersResponse>(" in result.services_code
        assert "import { http } from '~/client/factory';" in result.services_code
        assert "import type { RequestConfig } from '~/client';" in result.services_code

    def test_without_types_file_services_are_self_contained(
        self, users_api: APIDocumentation
    ) -> None:
        result = generate_services(users_api, GeneratorConfig(include_types=False))
        code = result.services_code
        assert result.types == ""
        assert "./types" not in code
        assert "import type { APIResponse, RequestConfig } from '@/lib/api-client';\n" in code
        for name in ("GetUsersParams", "GetUsersItem", "UserRequest", "UserRecordResponse"):
            assert re.search(rf"^export (interface|type) {name}\b", code, re.MULTILINE)
        assert code.index("// Types") < code.index("export const getGetUsers")
        assert _service(result, "getUserById").imports == [
            "import type { APIResponse, RequestConfig } from '@/lib/api-client';",
            "import { apiClient } from '@/lib/api-client-factory';",
        ]

    def test_types_file_enabled_keeps_declarations_out(self, users_result) -> None:
        assert "// Types" not in users_result.services_code
        assert "export interface" not in users_result.services_code

    def test_disabled_artifacts_are_empty(self, users_api: APIDocumentation) -> None:
        result = generate_services(
            users_api, GeneratorConfig(include_types=False, include_hooks=False)
        )
        assert result.types == ""
        assert result.hooks == ""
        assert result.services_code
        assert "from './hooks'" not in result.index
        assert "from './types'" not in result.index


class TestServicesFile:
    def test_header_and_imports(self, users_result) -> None:
        assert users_result.services_code.startswith(
            "/**\n"
            " * API service functions\n"
            " * Generated from Users API v1.2.0. Do not edit by hand.\n"
            " */\n"
            "\n"
            "import type { RequestConfig } from '@/lib/api-client';\n"
            "import { apiClient } from '@/lib/api-client-factory';\n"
            "import type { APIResponse, GetUsersParams, GetUsersResponse, UserByIdResponse, "
            "UserRequest, UserResponse, UserRecordResponse, UsersStatusResponse } from './types';\n"
        )

    def test_contains_every_function(self, users_result) -> None:
        for service in users_result.services:
            assert service.code in users_result.services_code

    def test_accepts_plain_mapping(self, users_api_raw: dict[str, Any], users_result) -> None:
        assert generate_services(users_api_raw) == users_result


class TestGenerationProperties:
    def test_deterministic(self, users_api_raw: dict[str, Any]) -> None:
        first = generate_services(users_api_raw)
        second = generate_services(users_api_raw)
        assert first.model_dump() == second.model_dump()

    def test_every_path_token_is_substituted(self, users_result) -> None:
        for service in users_result.services:
            tokens = re.findall(r"\{([^}]+)\}", service.endpoint.path or "")
            url = re.search(r"`([^`]*)`", service.code).group(1)
            for token in tokens:
                assert "${" + token + "}" in url
            assert not re.search(r"(?<!\$)\{", url)

    def test_distinct_names_give_distinct_symbols(self, users_result) -> None:
        names = [s.function_name for s in users_result.services]
        assert len(set(names)) == len(names)
        declared = re.findall(r"^export (?:interface|type) (\w+)", users_result.types, re.MULTILINE)
        assert len(set(declared)) == len(declared)

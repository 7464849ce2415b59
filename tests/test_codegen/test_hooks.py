"""Tests for apidocgen.codegen.hooks -- react-query hooks."""

from __future__ import annotations

import pytest

from apidocgen.codegen import generate_hooks, generate_services
from apidocgen.codegen.hooks import hook_name
from apidocgen.models import APIDocumentation, Endpoint, GeneratorConfig


@pytest.fixture
def hooks_text(users_api: APIDocumentation) -> str:
    return generate_services(users_api).hooks


class TestHookNames:
    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            ("GET", "useUsers"),
            ("POST", "useUsersMutation"),
            ("PUT", "useUsersMutation"),
            ("PATCH", "useUsersMutation"),
            ("DELETE", "useUsersMutation"),
            ("HEAD", None),
            ("OPTIONS", None),
        ],
    )
    def test_hook_per_method(self, method: str, expected) -> None:
        endpoint = Endpoint(id="x", name="users", method=method, path="/users")
        assert hook_name(endpoint) == expected


class TestHooksFile:
    def test_imports(self, hooks_text: str) -> None:
        assert (
            "import { useQuery, useMutation, useQueryClient } from '@tanstack/react-query';\n"
            "import type { UseQueryOptions, UseMutationOptions } from '@tanstack/react-query';\n"
        ) in hooks_text
        assert "import { getGetUsers } from './services';" in hooks_text
        assert "import { deleteUserRecord } from './services';" in hooks_text
        assert "headUsersStatus" not in hooks_text

    def test_query_hook(self, hooks_text: str) -> None:
        assert (
            "/**\n"
            " * List users\n"
            " */\n"
            "export const useGetUsers = (\n"
            "  params?: Parameters<typeof getGetUsers>[0],\n"
            "  options?: Omit<UseQueryOptions<Awaited<ReturnType<typeof getGetUsers>>>, "
            "'queryKey' | 'queryFn'>\n"
            ") => {\n"
            "  return useQuery({\n"
            "    queryKey: ['get-users', params],\n"
            "    queryFn: () => getGetUsers(params),\n"
            "    ...options,\n"
            "  });\n"
            "};\n"
        ) in hooks_text

    def test_query_hook_with_path_parameters_spreads(self, hooks_text: str) -> None:
        assert "  params: Parameters<typeof getUserById>,\n" in hooks_text
        assert "    queryKey: ['user-by-id', params],\n" in hooks_text
        assert "    queryFn: () => getUserById(...params),\n" in hooks_text

    def test_mutation_hook_invalidates_everything(self, hooks_text: str) -> None:
        assert "export const useUserMutation = (\n" in hooks_text
        assert (
            "  const queryClient = useQueryClient();\n"
            "\n"
            "  return useMutation({\n"
            "    mutationFn: (args: Parameters<typeof createUser>) =>\n"
            "      createUser(...args),\n"
            "    onSuccess: () => {\n"
            "      queryClient.invalidateQueries();\n"
            "    },\n"
            "    ...options,\n"
            "  });\n"
        ) in hooks_text
        assert "export const useUserRecordMutation = (\n" in hooks_text

    def test_only_needed_imports(self, make_doc, make_endpoint) -> None:
        result = generate_services(make_doc(make_endpoint()))
        assert "import { useQuery } from '@tanstack/react-query';" in result.hooks
        assert "import type { UseQueryOptions } from '@tanstack/react-query';" in result.hooks
        assert "useMutation" not in result.hooks

    def test_custom_query_library(self, users_api: APIDocumentation) -> None:
        services = generate_services(users_api).services
        text = generate_hooks(services, GeneratorConfig(query_library="react-query"))
        assert "} from 'react-query';" in text
        assert "@tanstack" not in text

    def test_no_hookable_endpoints(self, make_doc, make_endpoint) -> None:
        result = generate_services(make_doc(make_endpoint(method="HEAD")))
        assert "export const" not in result.hooks
        assert "import {" not in result.hooks

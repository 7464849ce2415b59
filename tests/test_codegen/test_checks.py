"""Tests for apidocgen.codegen.checks -- warnings about generated services."""

from __future__ import annotations

from apidocgen.codegen import check_services, generate_services
from apidocgen.models import (
    APIDocumentation,
    Endpoint,
    GeneratedService,
    GeneratorConfig,
    ServiceGenerationResult,
    ValidationWarning,
)


def _messages(warnings: list[ValidationWarning]) -> list[str]:
    return [w.message for w in warnings]


class TestCleanOutput:
    def test_users_api_has_no_findings(self, users_api: APIDocumentation) -> None:
        assert check_services(generate_services(users_api)) == []

    def test_without_types_file(self, users_api: APIDocumentation) -> None:
        result = generate_services(users_api, GeneratorConfig(include_types=False))
        assert check_services(result) == []

    def test_any_in_summary_is_not_flagged(self, make_doc, make_endpoint) -> None:
        doc = make_doc(make_endpoint(summary="Returns any user"))
        assert check_services(generate_services(doc)) == []


class TestServiceFindings:
    def test_deprecated_endpoint(self, make_doc, make_endpoint) -> None:
        doc = make_doc(make_endpoint(deprecated=True))
        assert check_services(generate_services(doc)) == [
            ValidationWarning(
                field="endpoints[0]",
                message='Endpoint "users" is deprecated',
                suggestion="Plan a migration away from this endpoint",
            )
        ]

    def test_any_in_signature(self, make_doc, make_endpoint) -> None:
        doc = make_doc(
            make_endpoint(
                path="/users/{filter}",
                parameters=[
                    {"name": "filter", "in": "path", "type": "object", "required": True}
                ],
            )
        )
        warnings = check_services(generate_services(doc))
        assert _messages(warnings) == ['getUsers uses "any" in its signature']
        assert warnings[0].field == "endpoints[0]"

    def test_hand_written_service(self) -> None:
        service = GeneratedService(
            name="broken",
            function_name="list-users",
            code="const listUsers = () => apiClient.get('/users');",
            endpoint=Endpoint(name="broken", method="GET", path="/users"),
        )
        warnings = check_services(ServiceGenerationResult(services=[service]))
        assert _messages(warnings) == [
            '"list-users" is not a valid function name',
            "list-users is not exported",
            "list-users has no error handling",
            "list-users has no JSDoc comment",
        ]
        assert {w.field for w in warnings} == {"endpoints[0]"}

    def test_missing_promise_return(self) -> None:
        code = (
            "/**\n * List users\n */\n"
            "export const listUsers = async () => {\n"
            "  try {\n    return 1;\n  } catch (error) {\n    throw error;\n  }\n};"
        )
        service = GeneratedService(
            name="users",
            function_name="listUsers",
            code=code,
            endpoint=Endpoint(name="users", method="GET", path="/users"),
        )
        warnings = check_services(ServiceGenerationResult(services=[service]))
        assert _messages(warnings) == ["listUsers does not declare a Promise return type"]


class TestCrossServiceFindings:
    def test_duplicate_function_name(self, make_doc, make_endpoint) -> None:
        doc = make_doc(
            make_endpoint(id="a", name="users", path="/users"),
            make_endpoint(id="b", name="Users!", path="/people"),
        )
        warnings = check_services(generate_services(doc))
        names = [w for w in warnings if w.message.startswith("Function name")]
        assert names == [
            ValidationWarning(
                field="endpoints[1].name",
                message='Function name "getUsers" is generated for endpoints[0], endpoints[1]',
                suggestion="Rename one of the endpoints",
            )
        ]

    def test_duplicate_route(self, make_doc, make_endpoint) -> None:
        doc = make_doc(
            make_endpoint(id="a", name="users", path="/users"),
            make_endpoint(id="b", name="people", method="get", path="/users"),
        )
        warnings = check_services(generate_services(doc))
        assert warnings == [
            ValidationWarning(
                field="endpoints[1]",
                message='Route "GET:/users" is generated for endpoints[0], endpoints[1]',
                suggestion="Give each endpoint a unique method and path",
            )
        ]

    def test_type_declaration_problems(self) -> None:
        text = "export interface A {\n}\nexport interface A {\n}\n"
        warnings = check_services(ServiceGenerationResult(types=text))
        assert warnings == [
            ValidationWarning(
                field="types",
                message="Duplicate interface names: A",
                suggestion="Check the schemas behind the generated types",
            )
        ]

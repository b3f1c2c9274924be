"""
Schema validators for API response payloads.

Response shapes are declared once, in the OpenAPI contract under
``contracts/users_openapi.yaml``. This module turns contract components into
``SchemaValidator`` objects that API tests use as an assertion boundary:

    response = api_request(method="POST", url="api/users/login", body=...)
    ERROR_RESPONSE_SCHEMA.validate(response.body)

Validation is pure. It never touches the network, and a failure reports every
violating field at once instead of stopping at the first one.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

import jsonschema
import yaml

T = TypeVar("T")


def _contract_path() -> Path:
    """Return the users OpenAPI contract file path."""
    return Path(__file__).resolve().parents[1] / "contracts" / "users_openapi.yaml"


@lru_cache(maxsize=1)
def load_contract() -> dict[str, Any]:
    """Load the raw OpenAPI document from disk."""
    with _contract_path().open("r", encoding="utf-8") as contract_file:
        return yaml.safe_load(contract_file)


@lru_cache(maxsize=1)
def _load_jsonschema_ready_contract() -> dict[str, Any]:
    """
    Return a JSON-schema-friendly copy of the OpenAPI contract.

    OpenAPI 3.0 uses `nullable: true`, while jsonschema expects an explicit
    `null` type (or `anyOf`).
    """
    contract_copy = copy.deepcopy(load_contract())
    convert_nullable_fields_in_place(contract_copy)
    return contract_copy


def convert_nullable_fields_in_place(node: Any) -> None:
    """
    Recursively convert OpenAPI `nullable` into jsonschema-compatible forms.

    Rules used:
    - `type: X` + `nullable: true` becomes `type: [X, "null"]`.
    - `$ref` + `nullable: true` becomes `anyOf: [{$ref: ...}, {type: "null"}]`.
    """
    if isinstance(node, dict):
        for value in list(node.values()):
            convert_nullable_fields_in_place(value)

        if node.get("nullable") is True:
            node.pop("nullable", None)

            if "type" in node:
                node_type = node["type"]
                if isinstance(node_type, list):
                    if "null" not in node_type:
                        node_type.append("null")
                else:
                    node["type"] = [node_type, "null"]
            elif "$ref" in node:
                ref_value = node.pop("$ref")
                node["anyOf"] = [{"$ref": ref_value}, {"type": "null"}]
            else:
                node["anyOf"] = [{"type": "null"}]

    elif isinstance(node, list):
        for item in node:
            convert_nullable_fields_in_place(item)


@dataclass(frozen=True)
class FieldViolation:
    """One field that does not match the declared shape."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class SchemaViolationError(AssertionError):
    """
    Raised when a payload does not match its schema.

    Subclasses ``AssertionError`` so pytest reports it as a failed assertion.

    Attributes:
        schema_name: Name of the validator that rejected the payload.
        violations: Every violating field, in document order.
        payload: The rejected value.
    """

    def __init__(self, schema_name: str, violations: list[FieldViolation], payload: Any):
        self.schema_name = schema_name
        self.violations = violations
        self.payload = payload
        details = "\n".join(f"  - {violation}" for violation in violations)
        compact_payload = json.dumps(payload, indent=2, default=str)
        super().__init__(
            f"Payload does not match schema {schema_name!r} "
            f"({len(violations)} violation(s)):\n{details}\n"
            f"Payload:\n{compact_payload}"
        )


class SchemaValidator:
    """
    Declarative shape description with a validate-or-fail operation.

    Args:
        name: Human readable schema name used in failure messages.
        schema: JSON Schema (draft 7). Local ``#/components/...`` references
            resolve against the schema's own ``components`` key.
    """

    def __init__(self, name: str, schema: dict[str, Any]):
        self.name = name
        self.schema = schema
        self._validator = jsonschema.Draft7Validator(
            schema, format_checker=jsonschema.FormatChecker()
        )

    def errors_for(self, candidate: Any) -> list[FieldViolation]:
        """Return every violation in ``candidate`` (empty when it conforms)."""
        errors = sorted(
            self._validator.iter_errors(candidate),
            key=lambda error: [str(part) for part in error.absolute_path],
        )
        return [
            FieldViolation(
                path=".".join(str(part) for part in error.absolute_path) or "<root>",
                message=error.message,
            )
            for error in errors
        ]

    def is_valid(self, candidate: Any) -> bool:
        return not self.errors_for(candidate)

    def validate(self, candidate: T) -> T:
        """
        Return ``candidate`` unchanged if it conforms.

        Raises:
            SchemaViolationError: Listing every violating field.
        """
        violations = self.errors_for(candidate)
        if violations:
            raise SchemaViolationError(self.name, violations, candidate)
        return candidate

    def __repr__(self) -> str:
        return f"SchemaValidator({self.name!r})"


def validator_for(component: str) -> SchemaValidator:
    """
    Build a validator for a named schema in ``components/schemas``.

    Raises:
        KeyError: If the contract does not declare ``component``.
    """
    contract = _load_jsonschema_ready_contract()
    component_schema = contract["components"]["schemas"][component]

    # Root the schema so local refs like `#/components/schemas/ErrorMessages`
    # can resolve during validation.
    schema = copy.deepcopy(component_schema)
    schema["components"] = contract["components"]
    return SchemaValidator(component, schema)


def response_validator(path_template: str, method: str, status_code: int) -> SchemaValidator:
    """Build a validator for the documented response of an endpoint/status pair."""
    contract = _load_jsonschema_ready_contract()
    operation = contract["paths"][path_template][method.lower()]
    response = operation["responses"][str(status_code)]
    response_schema = response["content"]["application/json"]["schema"]

    ref = response_schema.get("$ref", "")
    if ref.startswith("#/components/schemas/"):
        return validator_for(ref.rsplit("/", 1)[-1])

    schema = copy.deepcopy(response_schema)
    schema["components"] = contract["components"]
    return SchemaValidator(f"{method.upper()} {path_template} {status_code}", schema)


USER_SCHEMA = validator_for("User")
ERROR_RESPONSE_SCHEMA = validator_for("ErrorResponse")

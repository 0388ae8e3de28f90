"""Tests for typso.adapters.web request body validation."""

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from typso.adapters import validate_request_body
from typso.validator import ValidationConfig, Validator, set_warn_only

USER_SCHEMA = {"name": "string", "age": "number"}


def make_app(schema=USER_SCHEMA, validator=None, calls=None):
    calls = calls if calls is not None else []

    @validate_request_body(schema, validator)
    async def create_user(request: Request):
        body = await request.json()
        calls.append(body)
        return JSONResponse(body, status_code=201)

    @validate_request_body(schema, validator)
    def sync_create_user(request: Request):
        calls.append("sync")
        return PlainTextResponse("created", status_code=201)

    return Starlette(
        routes=[
            Route("/users", create_user, methods=["POST"]),
            Route("/sync/users", sync_create_user, methods=["POST"]),
        ]
    )


@pytest.fixture
def calls():
    return []


@pytest.fixture
def client(calls):
    return TestClient(make_app(calls=calls))


class TestValidateRequestBody:
    """Test the request body decorator."""

    def test_valid_body_is_forwarded(self, client, calls):
        response = client.post("/users", json={"name": "Alice", "age": 25})

        assert response.status_code == 201
        assert response.json() == {"name": "Alice", "age": 25}
        assert calls == [{"name": "Alice", "age": 25}]

    def test_extra_fields_allowed(self, client):
        response = client.post("/users", json={"name": "Alice", "age": 25, "admin": True})
        assert response.status_code == 201

    def test_invalid_field(self, client, calls):
        response = client.post("/users", json={"name": "Alice", "age": "25"})

        assert response.status_code == 400
        assert response.json() == {
            "error": "Field 'age': TypeKindMismatch: Expected number but received string"
        }
        assert calls == []

    def test_missing_field(self, client):
        response = client.post("/users", json={"name": "Alice"})

        assert response.status_code == 400
        assert response.json() == {
            "error": "Field 'age': TypeKindMismatch: Expected number but received undefined"
        }

    @pytest.mark.parametrize("body", [[1, 2], "text", None])
    def test_body_must_be_object(self, client, body):
        response = client.post("/users", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "NotAnObject: Expected an object"}

    def test_empty_body(self, client):
        response = client.post("/users")

        assert response.status_code == 400
        assert response.json() == {"error": "NotAnObject: Expected an object"}

    def test_malformed_json(self, client, calls):
        response = client.post(
            "/users", content=b"{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid JSON body")
        assert calls == []

    @pytest.mark.parametrize("body", [{"age": "x"}, {}])
    def test_raising_predicate_returns_400(self, calls, body):
        # "x" >= 0 and MISSING >= 0 both raise TypeError inside the predicate
        client = TestClient(make_app(schema={"age": lambda v: v >= 0}, calls=calls))

        response = client.post("/users", json=body)

        assert response.status_code == 400
        assert "error" in response.json()
        assert calls == []

    def test_sync_endpoint(self, client, calls):
        response = client.post("/sync/users", json={"name": "Alice", "age": 25})

        assert response.status_code == 201
        assert response.text == "created"
        assert calls == ["sync"]

        assert client.post("/sync/users", json={"name": 1}).status_code == 400


class TestValidatorPolicy:
    """Test how the validator policy reaches the endpoint."""

    def test_warn_only_validator_forwards(self, calls):
        lenient = Validator(ValidationConfig(raise_on_failure=False))
        client = TestClient(make_app(validator=lenient, calls=calls))

        response = client.post("/users", json={"name": 1, "age": "25"})

        assert response.status_code == 201
        assert calls == [{"name": 1, "age": "25"}]

    def test_default_validator_resolved_per_request(self, client):
        assert client.post("/users", json={"name": 1}).status_code == 400

        set_warn_only(True)
        assert client.post("/users", json={"name": 1}).status_code == 201

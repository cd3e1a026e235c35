"""Tests for the API Gateway OpenAPI export."""

from __future__ import annotations

import yaml

from main import create_app
from openapi import API_KEY_SCHEME, build_openapi_schema, write_openapi_yaml


def test_build_openapi_schema_adds_api_gateway_extensions(fake_client_factory) -> None:
    schema = build_openapi_schema(create_app(fake_client_factory("unused")))

    assert schema["openapi"] == "3.0.0"
    assert schema["components"]["securitySchemes"][API_KEY_SCHEME] == {"type": "apiKey", "name": "x-api-key", "in": "header"}

    operation = schema["paths"]["/{word}"]["get"]
    assert operation["security"] == [{API_KEY_SCHEME: []}]
    assert operation["x-amazon-apigateway-integration"]["type"] == "aws_proxy"
    assert set(operation["responses"]) >= {"200", "400", "500"}


def test_write_openapi_yaml(tmp_path, fake_client_factory) -> None:
    target = tmp_path / "openapi.yaml"

    write_openapi_yaml(create_app(fake_client_factory("unused")), str(target))

    assert "/{word}" in yaml.safe_load(target.read_text())["paths"]

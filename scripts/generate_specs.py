#!/usr/bin/env python3
"""
Generate JSON Schemas, YAML variants, and OpenAPI from Pydantic models.

Outputs under src/specs/:
 - schemas/*.json (and *.yaml)
 - openapi.yaml and openapi.json
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

try:
    import yaml  # type: ignore
except Exception as exc:  # pragma: no cover
    print("PyYAML is required: pip install pyyaml", file=sys.stderr)
    raise


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
SPECS = SRC / "specs"
SCHEMAS_DIR = SPECS / "schemas"

sys.path.insert(0, str(ROOT))

from src.specs.models import (  # noqa: E402
    SCHEMA_MODELS,
    ErrorResponse,
    GenerateCreativeRequest,
    GenerateCreativeResponse,
    ImageResult,
    TaskStatusResponse,
    VideoResult,
)


def write_json_yaml(obj: dict, json_path: Path) -> None:
    json_path.parent.mkdir(parents=True, exist_ok=True)
    with json_path.open("w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)
    yaml_path = json_path.with_suffix(".yaml")
    with yaml_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def generate_model_schemas() -> None:
    for filename, model in SCHEMA_MODELS.items():
        schema = model.model_json_schema()
        write_json_yaml(schema, SCHEMAS_DIR / filename)


def _json_content(ref: str) -> dict:
    return {"application/json": {"schema": {"$ref": f"#/components/schemas/{ref}"}}}


def _error(description: str) -> dict:
    return {"description": description, "content": _json_content("ErrorResponse")}


def build_openapi() -> dict:
    # Inline the model schemas as OpenAPI components
    components = {
        "schemas": {
            "GenerateCreativeRequest": GenerateCreativeRequest.model_json_schema(),
            "GenerateCreativeEnvelope": GenerateCreativeResponse.model_json_schema(),
            "ImageResult": ImageResult.model_json_schema(),
            "VideoResult": VideoResult.model_json_schema(),
            "GenerateCreativeResponse": {
                "allOf": [
                    {"$ref": "#/components/schemas/GenerateCreativeEnvelope"},
                    {
                        "oneOf": [
                            {"$ref": "#/components/schemas/ImageResult"},
                            {"$ref": "#/components/schemas/VideoResult"},
                        ]
                    },
                ]
            },
            "TaskStatusResponse": TaskStatusResponse.model_json_schema(),
            "ErrorResponse": ErrorResponse.model_json_schema(),
        }
    }

    preflight = {
        "summary": "CORS preflight",
        "responses": {"200": {"description": "Empty body with CORS headers"}},
    }

    spec = {
        "openapi": "3.0.3",
        "info": {
            "title": "Creative Functions API",
            "version": "0.1.0",
            "description": "Image/video generation relay and video task polling.",
        },
        "servers": [
            {"url": "http://localhost:7071/api", "description": "Local Functions host"}
        ],
        "paths": {
            "/generate-creative": {
                "post": {
                    "summary": "Generate an image or start a video generation task",
                    "operationId": "generateCreative",
                    "requestBody": {
                        "required": True,
                        "content": _json_content("GenerateCreativeRequest"),
                    },
                    "responses": {
                        "200": {
                            "description": "Generation result merged with success, type and cost",
                            "content": _json_content("GenerateCreativeResponse"),
                        },
                        "400": _error("Invalid JSON, missing type/prompt, or unknown type"),
                        "405": _error("Method not allowed"),
                        "500": _error("Missing vendor credential or vendor failure"),
                    },
                },
                "options": preflight,
            },
            "/video-status": {
                "get": {
                    "summary": "Poll a video generation task",
                    "operationId": "getVideoStatus",
                    "parameters": [
                        {
                            "in": "query",
                            "name": "task_id",
                            "schema": {"type": "string"},
                            "required": True,
                        }
                    ],
                    "responses": {
                        "200": {
                            "description": "Normalized task status",
                            "content": _json_content("TaskStatusResponse"),
                        },
                        "400": _error("Missing task_id parameter"),
                        "405": _error("Method not allowed"),
                        "500": _error("Missing vendor credential or vendor failure"),
                    },
                },
                "options": preflight,
            },
        },
        "components": components,
    }
    return spec


def generate_openapi() -> None:
    spec = build_openapi()
    write_json_yaml(spec, SPECS / "openapi.json")


def main() -> None:
    generate_model_schemas()
    generate_openapi()
    print("Specs generated under src/specs/")


if __name__ == "__main__":
    main()

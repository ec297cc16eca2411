"""HTTP API for configuring pack sizes and calculating orders."""

from __future__ import annotations

import argparse
import os
from typing import Any

from dotenv import load_dotenv
from flask import Flask, jsonify, request, send_from_directory

from packsolver.config import ConfigError, PackSizeStore, init_redis
from packsolver.solver import solve_smart

DEFAULT_UI_DIR = "./ui"
DEFAULT_PORT = 8080

_ERROR_SCHEMA = {"type": "object", "additionalProperties": {"type": "string"}}

SWAGGER_SPEC: dict[str, Any] = {
    "schemes": [],
    "swagger": "2.0",
    "info": {"description": "", "title": "", "contact": {}, "version": ""},
    "host": "",
    "basePath": "",
    "paths": {
        "/config/packs": {
            "get": {
                "description": "Returns the list of configured pack sizes fetched from Redis",
                "consumes": ["application/json"],
                "produces": ["application/json"],
                "tags": ["config"],
                "summary": "Get current pack size configuration",
                "responses": {
                    "200": {
                        "description": "OK",
                        "schema": {
                            "type": "object",
                            "additionalProperties": {
                                "type": "array",
                                "items": {"type": "integer"},
                            },
                        },
                    },
                    "500": {"description": "Internal Server Error", "schema": _ERROR_SCHEMA},
                },
            },
            "post": {
                "description": (
                    "Set a new list of pack sizes (must be unique and > 0). It ensures "
                    "all pack sizes are positive integers, removes duplicates,"
                ),
                "consumes": ["application/json"],
                "produces": ["application/json"],
                "tags": ["config"],
                "summary": "Update pack size configuration",
                "parameters": [
                    {
                        "description": "Pack sizes",
                        "name": "request",
                        "in": "body",
                        "required": True,
                        "schema": {"$ref": "#/definitions/http.PackConfigRequest"},
                    }
                ],
                "responses": {
                    "200": {
                        "description": "OK",
                        "schema": {"$ref": "#/definitions/http.PackConfigResponse"},
                    },
                    "400": {"description": "Bad Request", "schema": _ERROR_SCHEMA},
                    "500": {"description": "Internal Server Error", "schema": _ERROR_SCHEMA},
                },
            },
        },
        "/order": {
            "post": {
                "description": "Calculates the optimal pack combination for the requested quantity",
                "consumes": ["application/json"],
                "produces": ["application/json"],
                "tags": ["order"],
                "summary": "Calculate pack distribution",
                "parameters": [
                    {
                        "description": "Order quantity",
                        "name": "request",
                        "in": "body",
                        "required": True,
                        "schema": {"$ref": "#/definitions/http.OrderRequest"},
                    }
                ],
                "responses": {
                    "200": {
                        "description": "OK",
                        "schema": {"$ref": "#/definitions/http.OrderResponse"},
                    },
                    "400": {"description": "Bad Request", "schema": _ERROR_SCHEMA},
                    "500": {"description": "Internal Server Error", "schema": _ERROR_SCHEMA},
                },
            }
        },
    },
    "definitions": {
        "http.OrderRequest": {
            "type": "object",
            "required": ["quantity"],
            "properties": {"quantity": {"type": "integer"}},
        },
        "http.OrderResponse": {
            "type": "object",
            "properties": {
                "packs": {
                    "type": "array",
                    "items": {"$ref": "#/definitions/packsolver.Pack"},
                },
                "total_items": {"type": "integer"},
            },
        },
        "http.PackConfigRequest": {
            "type": "object",
            "required": ["pack_sizes"],
            "properties": {
                "pack_sizes": {"type": "array", "items": {"type": "integer"}},
            },
        },
        "http.PackConfigResponse": {
            "type": "object",
            "properties": {
                "pack_sizes": {"type": "array", "items": {"type": "integer"}},
                "success": {"type": "boolean"},
            },
        },
        "packsolver.Pack": {
            "type": "object",
            "properties": {
                "count": {"type": "integer"},
                "size": {"type": "integer"},
            },
        },
    },
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _json_object() -> dict[str, Any] | None:
    """Return the request body as a JSON object, or None if it is not one."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        raw = request.get_data(as_text=True).strip()
        return {} if raw == "null" else None
    return body if isinstance(body, dict) else None


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def create_app(store: PackSizeStore, ui_dir: str | None = None) -> Flask:
    """Build the web application around a pack size store."""
    ui_path = os.path.abspath(ui_dir if ui_dir is not None else DEFAULT_UI_DIR)
    app = Flask(__name__, static_folder=ui_path, static_url_path="/static")
    app.json.sort_keys = False

    @app.get("/")
    def index():
        return send_from_directory(ui_path, "index.html")

    @app.get("/config/packs")
    def get_pack_sizes():
        try:
            sizes = store.get_pack_sizes()
        except ConfigError:
            return _error("failed to fetch pack sizes", 500)
        return jsonify({"pack_sizes": sizes})

    @app.post("/config/packs")
    def set_pack_sizes():
        body = _json_object()
        sizes = None if body is None else body.get("pack_sizes")
        if (
            not isinstance(sizes, list)
            or not sizes
            or not all(_is_int(size) for size in sizes)
        ):
            return _error("invalid or missing pack_sizes array", 400)
        if any(size <= 0 for size in sizes):
            return _error("pack sizes must be > 0", 400)

        clean = sorted(set(sizes))
        try:
            store.set_pack_sizes(clean)
        except ConfigError:
            return _error("could not store new config", 500)
        return jsonify({"success": True, "pack_sizes": clean})

    @app.post("/order")
    def create_order():
        body = _json_object()
        quantity = None if body is None else body.get("quantity")
        if not _is_int(quantity) or quantity <= 0:
            return _error("invalid or missing quantity", 400)

        try:
            sizes = store.get_pack_sizes()
        except ConfigError:
            return _error("could not fetch pack sizes", 500)

        try:
            packs, total = solve_smart(quantity, sizes)
        except ValueError:
            return _error("could not calculate pack distribution", 500)

        return jsonify(
            {
                "packs": [{"size": p.size, "count": p.count} for p in packs],
                "total_items": total,
            }
        )

    @app.get("/swagger/doc.json")
    def swagger_doc():
        return jsonify(SWAGGER_SPEC)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    return app


def main(argv: list[str] | None = None) -> None:
    """Load the environment, connect to Redis and serve the API."""
    parser = argparse.ArgumentParser(description="Pack size calculation server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--ui-dir", default=DEFAULT_UI_DIR)
    parser.add_argument("--env-file", default=".env")
    args = parser.parse_args(argv)

    load_dotenv(args.env_file)

    try:
        store = init_redis()
    except ConfigError as exc:
        raise SystemExit(f"failed to connect to Redis: {exc}") from exc

    app = create_app(store, args.ui_dir)
    try:
        app.run(host=args.host, port=args.port)
    except OSError as exc:
        raise SystemExit(f"failed to start server: {exc}") from exc
"""Pack size configuration stored in Redis."""

from __future__ import annotations

import json
import os
from typing import Any, Iterable

import redis

PACK_SIZES_KEY = "pack:sizes"
DEFAULT_PORT = 6379


class ConfigError(Exception):
    """Raised when the configuration cannot be read, stored or connected to."""


class PackSizeStore:
    """Reads and writes the list of pack sizes through a Redis client."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def get_pack_sizes(self) -> list[int]:
        """Return the stored pack sizes."""
        try:
            raw = self.client.get(PACK_SIZES_KEY)
        except redis.RedisError as exc:
            raise ConfigError(f"failed to read pack sizes: {exc}") from exc
        if raw is None:
            raise ConfigError("pack sizes are not configured")
        try:
            value = json.loads(raw)
        except (ValueError, TypeError) as exc:
            raise ConfigError(f"stored pack sizes are not valid JSON: {exc}") from exc
        if value is None:
            return []
        if not isinstance(value, list) or not all(
            isinstance(item, int) and not isinstance(item, bool) for item in value
        ):
            raise ConfigError("stored pack sizes are not a list of integers")
        return value

    def set_pack_sizes(self, sizes: Iterable[int]) -> None:
        """Store the pack sizes as a JSON array."""
        data = json.dumps(list(sizes), separators=(",", ":"))
        try:
            self.client.set(PACK_SIZES_KEY, data)
        except redis.RedisError as exc:
            raise ConfigError(f"failed to store pack sizes: {exc}") from exc


def _parse_host_port(addr: str) -> tuple[str, int]:
    host, sep, port_text = addr.rpartition(":")
    if not sep:
        return addr, DEFAULT_PORT
    host = host.strip("[]") or "localhost"
    try:
        port = int(port_text)
    except ValueError as exc:
        raise ConfigError(f"invalid REDIS_ADDR format: {addr!r}") from exc
    return host, port


def init_redis(addr: str | None = None) -> PackSizeStore:
    """Connect to Redis and return a store for the pack sizes.

    ``addr`` is either ``host:port`` or a ``redis://`` URI; it defaults to
    the ``REDIS_ADDR`` environment variable.
    """
    if addr is None:
        addr = os.environ.get("REDIS_ADDR", "")
    if not addr:
        raise ConfigError("REDIS_ADDR is not set")

    if addr.startswith("redis://"):
        try:
            client = redis.Redis.from_url(addr)
        except ValueError as exc:
            raise ConfigError(f"invalid REDIS_ADDR format: {exc}") from exc
    else:
        host, port = _parse_host_port(addr)
        client = redis.Redis(host=host, port=port)

    try:
        client.ping()
    except redis.RedisError as exc:
        raise ConfigError(f"failed to connect to Redis: {exc}") from exc

    return PackSizeStore(client)
"""Redis backend implementing IMetadataStore."""

from __future__ import annotations

import redis

from wardrobe.core.exceptions import MetadataStoreError


class RedisMetadataStore:
    """Production IMetadataStore backed by Redis hashes."""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 password: str | None = None) -> None:
        self._host = host
        self._port = port
        self._db = db
        self._client = redis.Redis(
            host=host, port=port, db=db, password=password, decode_responses=True,
        )

    def set_fields(self, key: str, record: dict[str, str]) -> int:
        """HSET every field of ``record``; returns the number of newly created fields."""
        try:
            return int(self._client.hset(key, mapping=record))
        except Exception as exc:
            raise MetadataStoreError(f"Redis HSET failed for key={key!r}: {exc}") from exc

    def get_fields(self, key: str) -> dict[str, str]:
        try:
            return self._client.hgetall(key)
        except Exception as exc:
            raise MetadataStoreError(f"Redis HGETALL failed for key={key!r}: {exc}") from exc

    def delete_key(self, key: str) -> int:
        try:
            return int(self._client.delete(key))
        except Exception as exc:
            raise MetadataStoreError(f"Redis DEL failed for key={key!r}: {exc}") from exc

    def list_keys(self, pattern: str) -> list[str]:
        try:
            return list(self._client.keys(pattern))
        except Exception as exc:
            raise MetadataStoreError(f"Redis KEYS failed for pattern={pattern!r}: {exc}") from exc

    def scan(self, cursor: int, pattern: str, count: int) -> tuple[int, list[str]]:
        try:
            next_cursor, keys = self._client.scan(cursor=cursor, match=pattern, count=count)
            return int(next_cursor), list(keys)
        except Exception as exc:
            raise MetadataStoreError(
                f"Redis SCAN failed at cursor={cursor} pattern={pattern!r}: {exc}"
            ) from exc

    def type_of(self, key: str) -> str:
        try:
            return self._client.type(key)
        except Exception as exc:
            raise MetadataStoreError(f"Redis TYPE failed for key={key!r}: {exc}") from exc

    def read_string(self, key: str) -> str | None:
        try:
            return self._client.get(key)
        except Exception as exc:
            raise MetadataStoreError(f"Redis GET failed for key={key!r}: {exc}") from exc

    def read_list(self, key: str) -> list[str]:
        try:
            return self._client.lrange(key, 0, -1)
        except Exception as exc:
            raise MetadataStoreError(f"Redis LRANGE failed for key={key!r}: {exc}") from exc

    def read_set(self, key: str) -> list[str]:
        try:
            return sorted(self._client.smembers(key))
        except Exception as exc:
            raise MetadataStoreError(f"Redis SMEMBERS failed for key={key!r}: {exc}") from exc

    def read_sorted_set(self, key: str) -> list[tuple[str, float]]:
        try:
            return [
                (member, float(score))
                for member, score in self._client.zrange(key, 0, -1, withscores=True)
            ]
        except Exception as exc:
            raise MetadataStoreError(f"Redis ZRANGE failed for key={key!r}: {exc}") from exc

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except Exception as exc:
            raise MetadataStoreError(
                f"Redis PING failed for {self._host}:{self._port}/{self._db}: {exc}"
            ) from exc

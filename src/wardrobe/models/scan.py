"""Scan results: one entry per key, tagged by the stored container kind."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class HashEntry(BaseModel):
    key: str
    type: Literal["hash"] = "hash"
    value: dict[str, str] = Field(default_factory=dict)


class StringEntry(BaseModel):
    key: str
    type: Literal["string"] = "string"
    value: str | None = None


class ListEntry(BaseModel):
    key: str
    type: Literal["list"] = "list"
    value: list[str] = Field(default_factory=list)


class SetEntry(BaseModel):
    key: str
    type: Literal["set"] = "set"
    value: list[str] = Field(default_factory=list)


class SortedSetEntry(BaseModel):
    key: str
    type: Literal["zset"] = "zset"
    value: list[tuple[str, float]] = Field(default_factory=list)


class ErrorEntry(BaseModel):
    """A key whose value could not be resolved."""

    key: str
    type: Literal["error"] = "error"
    error: str


ScanEntry = Annotated[
    Union[HashEntry, StringEntry, ListEntry, SetEntry, SortedSetEntry, ErrorEntry],
    Field(discriminator="type"),
]


class ScanResult(BaseModel):
    """Outcome of an exhaustive scan.

    ``complete`` is False when the iteration cap stopped the scan before the
    cursor wrapped back to its initial value.
    """

    entries: list[ScanEntry] = Field(default_factory=list)
    complete: bool = True
    iterations: int = 0

    @property
    def keys(self) -> list[str]:
        return [e.key for e in self.entries]

    def hashes(self) -> list[HashEntry]:
        return [e for e in self.entries if isinstance(e, HashEntry)]

    def errors(self) -> list[ErrorEntry]:
        return [e for e in self.entries if isinstance(e, ErrorEntry)]

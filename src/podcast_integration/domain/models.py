"""Domain models for the podcast integration service."""

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

PayloadT = TypeVar("PayloadT")


class Manifest(BaseModel, frozen=True):
    """Production manifest as written into the inbound directory."""

    interview_file: str = Field(
        validation_alias=AliasChoices("interviewFile", "interview_file", "interview")
    )
    introduction_file: str = Field(
        validation_alias=AliasChoices(
            "introductionFile", "introduction_file", "introduction"
        )
    )
    timestamp: int
    description: str


class ProductionRequest(BaseModel):
    """Canonical payload published for the downstream processor."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    interview_file: str
    introduction_file: str
    file_name: str
    timestamp: int
    description: str


class Message(BaseModel, Generic[PayloadT], frozen=True):
    """A payload travelling through the pipeline with its read-only headers."""

    payload: PayloadT
    headers: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("headers", mode="after")
    @classmethod
    def _freeze_headers(cls, headers: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(headers))

    def with_payload(self, payload: Any) -> "Message":
        """Returns a new message carrying `payload` and the same headers."""
        return Message(payload=payload, headers=self.headers)

    def with_headers_if_absent(self, headers: Mapping[str, Any]) -> "Message":
        """Returns a new message with `headers` added where no key exists yet."""
        merged = dict(headers)
        merged.update(self.headers)
        return Message(payload=self.payload, headers=merged)


class FileEvent(BaseModel, frozen=True):
    """A file discovered in the inbound directory during a tick."""

    path: Path
    name: str
    size: int
    modified_at: float

    @property
    def version(self) -> tuple[str, int, float]:
        return (self.name, self.size, self.modified_at)

    def headers(self) -> dict[str, Any]:
        """Headers describing the originating file."""
        return {
            "file_name": self.name,
            "file_original_file": str(self.path),
            "file_relative_path": self.name,
        }


class FileState(str, Enum):
    """Where a single file ended up in its pass through the pipeline."""

    DISCOVERED = "discovered"
    VALIDATED = "validated"
    PARSED = "parsed"
    TRANSFORMED = "transformed"
    PUBLISHED = "published"
    REJECTED = "rejected"
    FAILED = "failed"


class ProcessingResult(BaseModel, frozen=True):
    """Terminal state of one file, and whether the next tick should retry it."""

    file_name: str
    state: FileState
    retryable: bool = False

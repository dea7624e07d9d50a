"""Message and content block models for the Messages API.

Content blocks are Pydantic models joined in a discriminated union
(ContentBlock) keyed on ``type``. Blocks keep unknown keys so an
assistant turn can be echoed back to the API exactly as it arrived.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from toolrelay.exceptions import MalformedResponseError


# ---------------------------------------------------------------------------
# Content blocks
# ---------------------------------------------------------------------------


class TextBlock(BaseModel):
    """Plain text produced by the model or sent by the user."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["text"] = "text"
    text: str


class ToolUseBlock(BaseModel):
    """A tool invocation requested by the model."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: dict = Field(default_factory=dict)


class ToolResultBlock(BaseModel):
    """Result of a tool invocation, referencing the request by id."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    content: str
    is_error: bool = False


ContentBlock = Annotated[
    Union[TextBlock, ToolUseBlock, ToolResultBlock],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Conversation
# ---------------------------------------------------------------------------


class Message(BaseModel):
    """A single conversation turn."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: Union[str, list[ContentBlock]]

    @classmethod
    def user(cls, content: str | list[ContentBlock]) -> Message:
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str | list[ContentBlock]) -> Message:
        return cls(role="assistant", content=content)

    def to_wire(self) -> dict:
        """Serialize to the request-body shape expected by the API."""
        if isinstance(self.content, str):
            return {"role": self.role, "content": self.content}
        return {
            "role": self.role,
            "content": [block.model_dump(mode="json") for block in self.content],
        }


class Usage(BaseModel):
    """Token counts reported by the API."""

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


class ModelResponse(BaseModel):
    """Parsed Messages API response."""

    model_config = ConfigDict(frozen=True)

    content: list[ContentBlock]
    model: str
    stop_reason: str | None = None
    usage: Usage = Field(default_factory=Usage)
    id: str | None = None

    @classmethod
    def from_wire(cls, data: object) -> ModelResponse:
        """Validate a decoded JSON body.

        Raises:
            MalformedResponseError: If the body does not have the expected shape.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Unexpected response format: {exc.error_count()} validation "
                f"error(s). Response: {data!r}"
            ) from exc

    @property
    def tool_uses(self) -> list[ToolUseBlock]:
        """The tool_use blocks, in the order the model emitted them."""
        return [block for block in self.content if isinstance(block, ToolUseBlock)]

    @property
    def text(self) -> str:
        """All text blocks joined with newlines."""
        return "\n".join(
            block.text for block in self.content if isinstance(block, TextBlock)
        )

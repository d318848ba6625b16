"""Research API (Perplexity chat completions) response types."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str


@dataclass(frozen=True)
class ApiCitation:
    """A citation as returned by the API, normalised to url/title."""

    url: str
    title: str
    source: str | None = None


@dataclass(frozen=True)
class ApiUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class ChatCompletionResponse:
    """The parts of a chat completion response the application uses."""

    content: str
    model: str | None = None
    citations: list[ApiCitation] = field(default_factory=list)
    usage: ApiUsage | None = None

"""Card tokenization port, fake adapter and factory.

The card-input widget and the payment provider behind it are an opaque
collaborator: they turn the captured card state plus the cardholder name into
a single-use token, or fail. This module defines that contract so the
checkout never depends on a particular provider.

Provides get_tokenizer() / set_tokenizer() to swap implementations:
- FakeTokenizer for development and testing (default)
- any provider adapter implementing CardTokenizer for production
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
from uuid import uuid4


@dataclass(frozen=True)
class TokenResult:
    """Result of a tokenization attempt."""

    success: bool
    token_id: str | None = None
    failure_reason: str | None = None


class CardTokenizer(ABC):
    """Abstract tokenization interface."""

    @abstractmethod
    async def create_token(self, cardholder_name: str, card: dict[str, Any]) -> TokenResult:
        """Exchange the captured card state for a single-use payment token.

        Adapters report a rejected card with `TokenResult(success=False)` and
        may raise TokenizationError for provider failures.
        """
        ...


class FakeTokenizer(CardTokenizer):
    """Configurable fake tokenizer.

    Simulates the payment widget without any external calls. It can be
    configured at runtime to succeed or fail, and it records every call so
    tests can assert on what the checkout sent.
    """

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Your card number is incomplete."
        self.calls: list[dict[str, Any]] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Your card number is incomplete.") -> None:
        """Configure tokenizer behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    async def create_token(self, cardholder_name: str, card: dict[str, Any]) -> TokenResult:
        # Only the fact that card state was passed is recorded, never its contents.
        self.calls.append({"cardholder_name": cardholder_name, "card_fields": sorted(card)})

        if self.should_succeed:
            return TokenResult(success=True, token_id=f"tok_{uuid4().hex[:24]}")
        return TokenResult(success=False, failure_reason=self.failure_reason)


_current_tokenizer: CardTokenizer | None = None


def get_tokenizer() -> CardTokenizer:
    """Return the current tokenizer. Defaults to FakeTokenizer."""
    global _current_tokenizer
    if _current_tokenizer is None:
        _current_tokenizer = FakeTokenizer()
    return _current_tokenizer


def set_tokenizer(tokenizer: CardTokenizer) -> None:
    """Override the active tokenizer (useful for tests)."""
    global _current_tokenizer
    _current_tokenizer = tokenizer


def reset_tokenizer() -> None:
    """Reset to the default tokenizer."""
    global _current_tokenizer
    _current_tokenizer = None

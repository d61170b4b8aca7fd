from __future__ import annotations

from .corpus import TRIVIA, generate_lexemes, generate_token_sources
from .fixtures import FIXTURES

__all__ = ["FIXTURES", "TRIVIA", "generate_lexemes", "generate_token_sources"]

"""Ports - interfaces/protocols for external dependencies."""

from .block_repo import BlockRepository
from .llm_service import LLMService

__all__ = [
    "BlockRepository",
    "LLMService",
]

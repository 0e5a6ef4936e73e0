"""Adapters - I/O implementations of ports."""

from .json_blocks import JsonBlockStore, BlockStoreError
from .grok_api import GrokChatService
from .claude_cli import ClaudeCLIService

__all__ = [
    "JsonBlockStore",
    "BlockStoreError",
    "GrokChatService",
    "ClaudeCLIService",
]

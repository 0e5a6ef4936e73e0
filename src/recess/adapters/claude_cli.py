"""Claude CLI adapter - subprocess wrapper for one-shot explanations."""

import logging
import subprocess
from pathlib import Path

from recess.ports.llm_service import LLMServiceError

logger = logging.getLogger(__name__)


class ClaudeCLIService:
    """
    Claude CLI subprocess adapter.

    Implements LLMService protocol. The system instruction is prepended to
    the prompt since the CLI takes a single message.
    """

    def __init__(
        self,
        cwd: Path | str | None = None,
        timeout: float = 8.0,
    ):
        self.cwd = Path(cwd) if cwd else None
        self.timeout = timeout

    def complete(
        self,
        system: str,
        prompt: str,
        max_tokens: int = 60,
        temperature: float = 0.7,
    ) -> str:
        """Generate a reply. max_tokens and temperature are not supported by the CLI."""
        try:
            proc = subprocess.run(
                ["claude", "-p", f"{system}\n\n{prompt}"],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise LLMServiceError("Claude CLI not found. Install with: npm install -g @anthropic-ai/claude-code")
        except subprocess.TimeoutExpired:
            raise LLMServiceError(f"Claude CLI timed out after {self.timeout}s")
        except (OSError, UnicodeDecodeError) as e:
            raise LLMServiceError(f"Claude CLI could not run: {e}") from e

        if proc.returncode != 0:
            logger.error(f"Claude CLI failed: {proc.stderr}")
            raise LLMServiceError(f"Claude CLI failed: {proc.stderr}")
        return proc.stdout

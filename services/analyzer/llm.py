"""Generative AI wrapper around a local Ollama model.

generate() is the only entry point. It returns the model's text, or None
whenever AI is disabled or anything goes wrong, and never raises, so callers
can always fall back to the rule-based path.
"""
import time
from typing import Optional

import ollama
import structlog

from . import config

logger = structlog.get_logger()

_client: Optional[ollama.Client] = None


def get_client() -> Optional[ollama.Client]:
    """Lazily create the Ollama client; None when AI is unavailable."""
    global _client
    if not config.USE_AI:
        return None
    if _client is not None:
        return _client

    try:
        _client = ollama.Client(host=config.OLLAMA_HOST, timeout=config.LLM_TIMEOUT)
        logger.info("ollama_client_initialized", host=config.OLLAMA_HOST, model=config.MODEL)
    except Exception as e:
        logger.error("ollama_client_init_failed", error=str(e))
        _client = None
    return _client


def generate(prompt: str) -> Optional[str]:
    """Send a prompt to the model. None signals "use the rule-based result"."""
    client = get_client()
    if client is None:
        return None

    try:
        start_time = time.time()

        response = client.generate(
            model=config.MODEL,
            prompt=prompt,
            format="json",
            options={"temperature": config.LLM_TEMPERATURE}
        )

        duration_ms = (time.time() - start_time) * 1000
        text = response["response"]

        logger.debug(
            "llm_response_received",
            duration_ms=duration_ms,
            response_length=len(text or "")
        )

        return text or None

    except Exception as e:
        logger.error("llm_generate_failed", model=config.MODEL, error=str(e))
        return None

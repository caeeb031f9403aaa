"""Completion provider adapter (OpenAI-compatible chat completions on Groq).
"""

from typing import Optional
import logging
import time

from openai import AsyncOpenAI, APIError

from app.exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger("macrorelay.completion")


class CompletionClient:
    """
    Thin wrapper around ``AsyncOpenAI`` for JSON-mode chat completions.

    The SDK client is built on first use so that a process without a
    configured key can still start and serve the other endpoints.

    Example:
        >>> client = CompletionClient(api_key="gsk_...")
        >>> text = await client.complete_json(SYSTEM_PROMPT, "2 eggs and toast")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.groq.com/openai/v1",
        model: str = "llama-3.3-70b-versatile",
        temperature: float = 0.3,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._model = model
        self._temperature = temperature
        self._client: Optional[AsyncOpenAI] = None

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self) -> AsyncOpenAI:
        if not self.is_configured:
            raise ConfigurationError("Groq API key not configured on server")
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key, base_url=self._base_url)
        return self._client

    async def complete_json(self, system_prompt: str, user_content: str) -> Optional[str]:
        """
        Request a JSON-formatted completion for a single user message.

        Args:
            system_prompt: Fixed instruction sent as the system message
            user_content: Raw user text sent as the user message

        Returns:
            Text content of the first choice, or None when the provider
            returned no choices or an empty message

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamError: On provider API failures
        """
        client = self._get_client()
        start_time = time.time()

        try:
            completion = await client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content},
                ],
                temperature=self._temperature,
                response_format={"type": "json_object"},
            )
        except APIError as exc:
            logger.warning("Completion request failed: %s", exc)
            raise UpstreamError(exc.message or str(exc)) from exc

        logger.info(
            "Completion received",
            extra={
                "model": self._model,
                "processing_time_ms": int((time.time() - start_time) * 1000),
            },
        )

        if not completion.choices:
            return None
        message = completion.choices[0].message
        return message.content if message is not None else None

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        if self._client is not None:
            await self._client.close()
            self._client = None

"""OpenAI-compatible chat-completions client used for prompt -> tool-call translation."""

import json
import logging
from typing import Any

import openai
from openai import AsyncOpenAI
from pydantic import BaseModel

from seigate.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class ToolCall(BaseModel):
    name: str
    args: dict[str, Any] = {}


class LanguageModel:
    """Thin wrapper over ``AsyncOpenAI``: one call to pick a tool, one to summarize its output."""

    def __init__(self, api_key: str, base_url: str, model: str, client: AsyncOpenAI | None = None) -> None:
        self._model = model
        self._client = client or AsyncOpenAI(api_key=api_key or "unset", base_url=base_url)
        self._configured = bool(api_key) or client is not None

    async def _complete(self, **kwargs: Any) -> Any:
        if not self._configured:
            raise ExternalServiceError("Language model is not configured (missing API key)")
        try:
            response = await self._client.chat.completions.create(model=self._model, **kwargs)
        except openai.OpenAIError as exc:
            raise ExternalServiceError(f"Language model request failed: {exc}") from exc
        if not response.choices:
            raise ExternalServiceError("Language model returned no choices")
        return response.choices[0].message

    async def select_tool(self, prompt: str, tools: list[dict[str, Any]]) -> ToolCall | str:
        """Return the first tool call the model makes, or its free-text answer."""
        message = await self._complete(
            messages=[{"role": "user", "content": prompt}],
            tools=tools,
        )
        if message.tool_calls:
            call = message.tool_calls[0]
            raw_args = call.function.arguments or "{}"
            try:
                args = json.loads(raw_args)
            except json.JSONDecodeError as exc:
                raise ExternalServiceError(f"Language model returned malformed arguments for {call.function.name}") from exc
            logger.info("Model selected %s", call.function.name)
            return ToolCall(name=call.function.name, args=args if isinstance(args, dict) else {})
        return message.content or ""

    async def summarize(self, payload: Any) -> str:
        text = json.dumps(payload, indent=2)
        message = await self._complete(
            messages=[{"role": "user", "content": f"Summarize the following wallet JSON for the user:\n{text}"}],
        )
        return message.content or ""

    async def aclose(self) -> None:
        await self._client.close()

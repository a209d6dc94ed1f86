"""Natural-language gateway: prompt -> tool call -> result -> prose summary."""

import logging
from typing import Any

from seigate.exceptions import ValidationError
from seigate.infra.llm.client import LanguageModel
from seigate.tools.catalog import list_tools
from seigate.tools.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)


class AssistantService:
    def __init__(self, llm: LanguageModel, dispatcher: ToolDispatcher, allow_writes: bool = False) -> None:
        self._llm = llm
        self._dispatcher = dispatcher
        self._allow_writes = allow_writes

    async def handle(self, prompt: str) -> dict[str, Any]:
        """Returns ``{functionName, args, summary}`` for a tool call or ``{text}`` for a plain answer."""
        if not prompt or not prompt.strip():
            raise ValidationError("Missing prompt")

        offered = list_tools(include_writes=self._allow_writes)
        choice = await self._llm.select_tool(prompt, [tool.to_openai() for tool in offered])
        if isinstance(choice, str):
            return {"text": choice}

        if choice.name not in {tool.name for tool in offered}:
            raise ValidationError(f"Unknown function: {choice.name}")

        output = await self._dispatcher.dispatch(choice.name, choice.args)
        summary = await self._llm.summarize({"functionName": choice.name, "args": choice.args, "output": output})
        return {"functionName": choice.name, "args": choice.args, "summary": summary}

from typing import Any

from pydantic import BaseModel


class AssistantRequest(BaseModel):
    prompt: str = ""


class AssistantResponse(BaseModel):
    functionName: str | None = None
    args: dict[str, Any] | None = None
    summary: str | None = None
    text: str | None = None

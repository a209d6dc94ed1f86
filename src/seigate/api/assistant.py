from typing import Annotated

from fastapi import APIRouter, Depends

from seigate.api.deps import get_assistant
from seigate.api.schemas.assistant import AssistantRequest, AssistantResponse
from seigate.services.assistant import AssistantService

router = APIRouter(prefix="/api/assistant", tags=["assistant"])


@router.post("", response_model=AssistantResponse, response_model_exclude_none=True)
async def ask(body: AssistantRequest, service: Annotated[AssistantService, Depends(get_assistant)]) -> dict:
    return await service.handle(body.prompt)

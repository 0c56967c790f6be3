"""
Output API endpoints.

Serves the converted LigaMagic text for the included files.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from mtgconverter.api.dependencies import get_workspace
from mtgconverter.api.schemas import OutputResponse
from mtgconverter.services.workspace import ConverterWorkspace

router = APIRouter(prefix="/output", tags=["output"])


@router.get("", response_model=OutputResponse)
async def get_output(
    workspace: Annotated[ConverterWorkspace, Depends(get_workspace)],
) -> OutputResponse:
    text = workspace.output
    return OutputResponse(text=text, line_count=len(text.splitlines()))


@router.get("/text", response_class=PlainTextResponse)
async def get_output_text(
    workspace: Annotated[ConverterWorkspace, Depends(get_workspace)],
) -> str:
    """Converted text only, ready to paste into a LigaMagic want list."""
    return workspace.output

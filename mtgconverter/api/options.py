"""
Options API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from mtgconverter.api.dependencies import get_workspace
from mtgconverter.api.schemas import OptionsModel
from mtgconverter.models.errors import SessionDecisionPendingError
from mtgconverter.services.workspace import ConverterWorkspace

router = APIRouter(prefix="/options", tags=["options"])


@router.get("", response_model=OptionsModel)
async def get_options(
    workspace: Annotated[ConverterWorkspace, Depends(get_workspace)],
) -> OptionsModel:
    return OptionsModel.from_options(workspace.options)


@router.put("", response_model=OptionsModel)
async def update_options(
    request: OptionsModel,
    workspace: Annotated[ConverterWorkspace, Depends(get_workspace)],
) -> OptionsModel:
    """
    Replace the conversion options.

    The output is recomputed immediately. Unknown condition codes are
    rejected with 422.
    """
    try:
        await workspace.set_options(request.to_options())
    except SessionDecisionPendingError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    return OptionsModel.from_options(workspace.options)

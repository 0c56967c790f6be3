"""
Session API endpoints.

On startup a previously stored session blocks further work until the
client either restores it or starts a new one.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from mtgconverter.api.dependencies import get_workspace
from mtgconverter.api.schemas import FileListResponse, FileResponse, SessionStatusResponse
from mtgconverter.services.workspace import ConverterWorkspace

router = APIRouter(prefix="/session", tags=["session"])

Workspace = Annotated[ConverterWorkspace, Depends(get_workspace)]


@router.get("", response_model=SessionStatusResponse)
async def get_session_status(workspace: Workspace) -> SessionStatusResponse:
    pending = workspace.pending_session
    if pending is None:
        return SessionStatusResponse(awaiting_decision=workspace.awaiting_decision)

    return SessionStatusResponse(
        awaiting_decision=workspace.awaiting_decision,
        stored_file_count=len(pending.file_entries),
        stored_timestamp=pending.timestamp,
    )


@router.post("/restore", response_model=FileListResponse)
async def restore_session(workspace: Workspace) -> FileListResponse:
    """
    Restore the stored session.

    Files, inclusion flags and options come back exactly as saved; file
    contents are not re-read. Only valid while the startup decision is
    pending.
    """
    if await workspace.restore_session() is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No stored session is awaiting a decision",
        )
    return FileListResponse(files=[FileResponse.from_entry(entry) for entry in workspace.files])


@router.post("/new", response_model=SessionStatusResponse)
async def start_new_session(workspace: Workspace) -> SessionStatusResponse:
    """Discard the stored session and start from defaults."""
    await workspace.start_new_session()
    return SessionStatusResponse(awaiting_decision=False)

"""
File API endpoints.

Upload, list, toggle and remove the CSV exports tracked by the session.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from mtgconverter.api.dependencies import get_workspace
from mtgconverter.api.schemas import FileListResponse, FileResponse
from mtgconverter.models.errors import ReadError, SessionDecisionPendingError
from mtgconverter.models.file_entry import FileMeta
from mtgconverter.models.upload import (
    AlreadyTracked,
    ContentReader,
    NewUpload,
    UploadCandidate,
)
from mtgconverter.parsers.liga_csv import is_accepted_file_name
from mtgconverter.services.workspace import ConverterWorkspace

router = APIRouter(prefix="/files", tags=["files"])

Workspace = Annotated[ConverterWorkspace, Depends(get_workspace)]


def _file_list(workspace: ConverterWorkspace) -> FileListResponse:
    return FileListResponse(
        files=[FileResponse.from_entry(entry) for entry in workspace.files],
        processing=workspace.processing,
    )


def _decision_pending(e: SessionDecisionPendingError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


def _require_tracked(workspace: ConverterWorkspace, file_id: str) -> None:
    if workspace.awaiting_decision:
        raise _decision_pending(SessionDecisionPendingError())
    if not any(entry.id == file_id for entry in workspace.files):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")


def _reader(upload: UploadFile) -> ContentReader:
    async def read() -> str:
        try:
            content = await upload.read()
            return content.decode("utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(upload.filename or "", str(e)) from e

    return read


@router.get("", response_model=FileListResponse)
async def list_files(workspace: Workspace) -> FileListResponse:
    """List tracked files in upload order."""
    return _file_list(workspace)


@router.post("", response_model=FileListResponse)
async def upload_files(
    workspace: Workspace,
    files: Annotated[list[UploadFile], File(description="CSV exports to add")],
    last_modified: Annotated[
        list[int] | None,
        Form(description="Modification time (epoch ms) per file, in upload order"),
    ] = None,
    restored_ids: Annotated[
        list[str] | None,
        Form(description="Ids of files re-surfaced from a restored session"),
    ] = None,
) -> FileListResponse:
    """
    Add uploaded CSV exports to the session.

    Files already tracked (same name, modification time and size) are
    skipped. Files that cannot be read or decoded are left out; the rest of
    the batch is still added.
    """
    names = [upload.filename or "" for upload in files]
    rejected = [name for name in names if not is_accepted_file_name(name)]
    if rejected:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Only CSV files are supported: {', '.join(rejected)}",
        )

    timestamps = last_modified or []
    candidates: list[UploadCandidate] = [AlreadyTracked(file_id) for file_id in restored_ids or []]
    for index, upload in enumerate(files):
        meta = FileMeta(
            name=names[index],
            last_modified=timestamps[index] if index < len(timestamps) else 0,
            size=upload.size or 0,
        )
        candidates.append(NewUpload(meta=meta, read=_reader(upload)))

    try:
        await workspace.ingest(candidates)
    except SessionDecisionPendingError as e:
        raise _decision_pending(e) from e

    return _file_list(workspace)


@router.post("/{file_id}/toggle", response_model=FileListResponse)
async def toggle_file(file_id: str, workspace: Workspace) -> FileListResponse:
    """Include or exclude one file's records from the output."""
    _require_tracked(workspace, file_id)
    await workspace.toggle_included(file_id)
    return _file_list(workspace)


@router.delete("/{file_id}", response_model=FileListResponse)
async def remove_file(file_id: str, workspace: Workspace) -> FileListResponse:
    """Stop tracking one file."""
    _require_tracked(workspace, file_id)
    await workspace.remove(file_id)
    return _file_list(workspace)


@router.delete("", response_model=FileListResponse)
async def reset_files(workspace: Workspace) -> FileListResponse:
    """Stop tracking every file."""
    try:
        await workspace.reset()
    except SessionDecisionPendingError as e:
        raise _decision_pending(e) from e

    return _file_list(workspace)

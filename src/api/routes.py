"""Host endpoints for the drop controller.

Handles file drops, reset trigger updates, and output reads.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from src.extraction.controller import (
    INVALID_FILE_MESSAGE,
    PROCESSING_ERROR_MESSAGE,
    DropController,
    get_controller,
)
from src.models.schemas import (
    ControllerOutput,
    ControllerStatus,
    DroppedFile,
    DropOutcome,
    DropResponse,
    ResetRequest,
    ResetResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["extraction"])

Controller = Annotated[DropController, Depends(get_controller)]


@router.post("/upload/pdf", response_model=DropResponse)
async def upload_pdf(controller: Controller, file: UploadFile | None = None) -> DropResponse:
    """Drop a PDF onto the extractor.

    Accepts a PDF form, reads its fields and stores the serialized
    ``{data, fields}`` result as the controller output.

    Args:
        controller: Drop controller holding the output.
        file: The uploaded PDF file (multipart/form-data); a request
            without one is rejected like any other invalid drop.

    Returns:
        DropResponse with the field count and serialized data.

    Raises:
        400: File is missing or not ``application/pdf``.
        422: File could not be read as a PDF form.
    """
    dropped = None
    if file is not None:
        dropped = DroppedFile(
            filename=file.filename or "",
            content_type=file.content_type,
            content=await file.read(),
        )

    outcome = await controller.on_drop(dropped)

    if outcome is DropOutcome.INVALID_TYPE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_FILE_MESSAGE,
        )
    if outcome is DropOutcome.PARSE_FAILED:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=PROCESSING_ERROR_MESSAGE,
        )

    output = controller.get_output()
    state = controller.state
    logger.info(f"Processed drop: {dropped.filename} ({state.field_count} fields)")

    return DropResponse(
        filename=dropped.filename,
        success=True,
        field_count=state.field_count,
        extracted_data=output,
        status_text=state.status_text,
    )


@router.post("/reset", response_model=ResetResponse)
async def reset(request: ResetRequest, controller: Controller) -> ResetResponse:
    """Push the host's reset trigger value.

    The output is cleared only when the value differs from the last one seen.
    """
    changed = controller.on_reset_signal(request.reset_trigger)
    state = controller.state
    return ResetResponse(
        reset=changed,
        reset_trigger=state.reset_trigger,
        status_text=state.status_text,
    )


@router.get("/output", response_model=ControllerOutput)
async def get_output(controller: Controller) -> ControllerOutput:
    """Return the current ``ExtractedData`` output."""
    return ControllerOutput(extracted_data=controller.get_output())


@router.get("/status", response_model=ControllerStatus)
async def get_status(controller: Controller) -> ControllerStatus:
    """Return the drop-zone label and the stored reset trigger."""
    state = controller.state
    return ControllerStatus(
        status_text=state.status_text,
        reset_trigger=state.reset_trigger,
        has_data=bool(state.last_extracted_data),
    )

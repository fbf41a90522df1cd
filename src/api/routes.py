"""API route definitions."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from src.api.dependencies import get_reference_data, get_workflow
from src.models import ResultForm
from src.services.reference_data import ReferenceDataLoader
from src.services.result_workflow import ResultWorkflow
from src.services.validator import validate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/api/skaters")
async def list_skaters(
    loader: ReferenceDataLoader = Depends(get_reference_data),
) -> JSONResponse:
    """List skaters for the skater picker.

    Returns:
        List of skaters with id, names and display name
    """
    skaters = await loader.load_skaters()
    return JSONResponse(
        content=[
            {
                "id": s.id,
                "firstName": s.first_name,
                "lastName": s.last_name,
                "displayName": s.display_name,
            }
            for s in skaters
        ]
    )


@router.get("/api/events")
async def list_events(
    loader: ReferenceDataLoader = Depends(get_reference_data),
) -> JSONResponse:
    """List events for the event picker.

    Returns:
        List of events with id and name
    """
    events = await loader.load_events()
    return JSONResponse(content=[{"id": e.id, "name": e.name} for e in events])


@router.post("/api/results")
async def add_result(
    form: ResultForm,
    workflow: ResultWorkflow = Depends(get_workflow),
    loader: ReferenceDataLoader = Depends(get_reference_data),
) -> JSONResponse:
    """Validate the form and record the result.

    Returns:
        201 with the stored result, 422 with per-field errors,
        or 500 with the generic failure message
    """
    errors = validate(form)
    if errors:
        return JSONResponse(status_code=422, content={"errors": errors})

    try:
        outcome = await workflow.submit(form)
    except Exception as e:
        logger.error(f"Unexpected error adding result: {e}")
        raise HTTPException(status_code=500, detail="Error adding result.")

    if not outcome.success:
        return JSONResponse(status_code=500, content={"message": outcome.message})

    loader.invalidate()
    return JSONResponse(
        status_code=201,
        content={
            "message": outcome.message,
            "result": outcome.result.model_dump(by_alias=True),
        },
    )

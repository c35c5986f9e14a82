import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auction_server import schemas
from auction_server.crud import crud_participant
from auction_server.database import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/participants",
    response_model=schemas.MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": schemas.ErrorResponse}},
)
async def create_participant_item(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db_session),
):
    """
    Stores one participant record exactly as the experiment frontend sent it.

    Fields are only type-coerced, never checked for presence. A value that
    cannot be coerced is reported the same way as a failed write.
    """
    # Raw submission, including payment details.
    logger.info("Received participant data: %s", payload)
    try:
        participant_in = schemas.ParticipantCreate.model_validate(payload)
        db_participant = await crud_participant.create_participant(db, participant_in)
    except (ValidationError, SQLAlchemyError) as e:
        logger.exception("Error while saving participant data")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error", "error": str(e)},
        )

    logger.info("Participant record stored with id %s", db_participant.id)
    return schemas.MessageResponse(message="Data saved successfully")


@router.get(
    "/participants",
    response_model=List[schemas.ParticipantRecord],
    responses={500: {"model": schemas.ErrorResponse}},
)
async def list_participant_items(db: AsyncSession = Depends(get_db_session)):
    try:
        return await crud_participant.list_participants(db)
    except SQLAlchemyError:
        logger.exception("Error while loading participant data")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error"},
        )

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, StreamingResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auction_server import schemas
from auction_server.core.security import verify_admin
from auction_server.crud import crud_participant
from auction_server.database import get_db_session
from auction_server.export import export_filename, records_to_csv

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


@router.get("/admin", response_class=HTMLResponse)
async def admin_dashboard(request: Request, admin_user: str = Depends(verify_admin)):
    logger.info("Admin '%s' opened the dashboard", admin_user)
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "participants_url": request.app.url_path_for("list_participant_items"),
            "export_url": request.app.url_path_for("export_participants_csv"),
        },
    )


@router.get("/admin/export.csv", response_description="CSV file of all participant records")
async def export_participants_csv(
    admin_user: str = Depends(verify_admin),
    db: AsyncSession = Depends(get_db_session),
):
    """Same table as the dashboard's in-browser export, built on the server."""
    logger.info("Admin '%s' requested the CSV export", admin_user)
    try:
        participants = await crud_participant.list_participants(db)
    except SQLAlchemyError:
        logger.exception("Error while loading participant data for export")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error"},
        )

    records = [
        schemas.ParticipantRecord.model_validate(p).model_dump(by_alias=True, mode="json")
        for p in participants
    ]
    filename = export_filename()
    return StreamingResponse(
        iter([records_to_csv(records)]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )

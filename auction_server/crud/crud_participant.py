from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from auction_server.models import Participant
from auction_server.schemas import ParticipantCreate


async def create_participant(
    db: AsyncSession, participant_in: ParticipantCreate
) -> Participant:
    values = participant_in.model_dump()
    if values.get("created_at") is None:
        # Let the column default stamp the insert time.
        values.pop("created_at", None)

    db_participant = Participant(**values)
    db.add(db_participant)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    await db.refresh(db_participant)
    return db_participant


async def list_participants(db: AsyncSession) -> List[Participant]:
    result = await db.execute(select(Participant).order_by(Participant.id))
    return list(result.scalars().all())

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String

from .database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# One row per submitted participant record. The free-form parts of a
# submission live in JSON columns, so the table behaves like a document
# collection: nothing is unique, nothing is required.
class Participant(Base):
    __tablename__ = "participants"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    participant_id = Column(String, nullable=True)
    group = Column(String, nullable=True)  # experiment condition label
    unique_code = Column(String, nullable=True)

    page_times = Column(JSON, nullable=True)
    # {"simulation": [...], "formal": [...]}
    bid_history = Column(JSON, nullable=True)
    survey_responses = Column(JSON, nullable=True)
    risk_responses = Column(JSON, nullable=True)

    immediate_purchase = Column(Boolean, nullable=True)
    final_winner = Column(Boolean, nullable=True)
    auction_profit = Column(Float, nullable=True)
    lottery_bonus = Column(Float, nullable=True)
    alipay = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

from sqlalchemy import Column, String, Text, DateTime
from datetime import datetime
from models.base import Base


class KeyValueEntry(Base):
    """
    One keyed value of the dashboard store.

    Design:
    - One row per collection (users, marketing-records, tasks, current-user)
    - value holds the whole collection as JSON text
    - Writes replace the full value; there are no partial updates
    """
    __tablename__ = "kv_store"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)

    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

"""SQLAlchemy ORM models for saved investment scenarios"""

import uuid
from sqlalchemy import Column, DateTime, JSON, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class SavedScenario(Base):
    """User's saved plan: the submitted input and the projection it produced"""

    __tablename__ = "saved_scenario"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    input_data = Column(JSON, nullable=False)
    result = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

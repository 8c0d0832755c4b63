from sqlalchemy import Column, Integer, String, DateTime
from vitalcheck.db.base import Base
from vitalcheck.core.timezone import utcnow


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow)

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from app.db.database import Base
from app.utility.time import utc_now


class SessionModel(Base):
    """Login session; a user keeps at most one, replaced on every login."""
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    token_digest = Column(String, unique=True, nullable=False, index=True)
    expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

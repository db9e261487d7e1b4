from sqlalchemy import Column, Integer, ForeignKey, DateTime, UniqueConstraint
from app.db.database import Base
from app.utility.time import utc_now


class WatchHistoryModel(Base):
    """Append-only watch history; id order is watch order."""
    __tablename__ = "watch_history"
    __table_args__ = (
        UniqueConstraint("user_id", "video_id", name="uq_watch_history_entry"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    video_id = Column(Integer, ForeignKey("videos.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Boolean, Float, Text
from app.db.database import Base
from app.utility.time import utc_now


class VideoModel(Base):
    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    video_file = Column(String, nullable=False)
    thumbnail = Column(String, nullable=False)
    asset_folder = Column(String, nullable=False)  # media host folder holding both files
    duration = Column(Float, nullable=False, default=0)
    views = Column(Integer, nullable=False, default=0)
    is_published = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utc_now, index=True)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

from sqlalchemy import Column, Integer, ForeignKey, DateTime, Enum, UniqueConstraint, Index
from app.db.database import Base
from app.utility.time import utc_now
import enum


class TargetKind(str, enum.Enum):
    """What a like/dislike points at; the id lives in target_id"""
    VIDEO = "video"
    COMMENT = "comment"
    TWEET = "tweet"


class InteractionType(str, enum.Enum):
    LIKE = "like"
    DISLIKE = "dislike"


def _values(enum_cls):
    return [member.value for member in enum_cls]


class LikeDislikeModel(Base):
    __tablename__ = "like_dislikes"
    __table_args__ = (
        UniqueConstraint("liked_by_id", "target_kind", "target_id", name="uq_like_dislike_target"),
        Index("ix_like_dislike_target", "target_kind", "target_id"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    target_kind = Column(Enum(TargetKind, name="target_kind", values_callable=_values), nullable=False)
    target_id = Column(Integer, nullable=False)
    liked_by_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(Enum(InteractionType, name="interaction_type", values_callable=_values), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

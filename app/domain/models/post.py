"""Post domain model — maps to the 'posts' table."""

import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.domain.models.user import utc_now


class PostCategory(str, enum.Enum):
    AGRICULTURE = "Agriculture"
    BUSINESS = "Business"
    EDUCATION = "Education"
    ENTERTAINMENT = "Entertainment"
    ART = "Art"
    INVESTMENT = "Investment"
    UNCATEGORIZED = "Uncategorized"
    WEATHER = "Weather"

    @classmethod
    def is_valid(cls, value) -> bool:
        return value in cls._value2member_map_


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    category = Column(String(50), nullable=False, default=PostCategory.UNCATEGORIZED.value, index=True)
    description = Column(Text, nullable=False)
    thumbnail = Column(String(500), nullable=False)
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, index=True)

    creator = relationship("User", back_populates="authored_posts")

    def __repr__(self):
        return f"<Post {self.id} - {self.title}>"

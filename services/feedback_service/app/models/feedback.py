from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
)
from .database import Base


class Feedback(Base):
    """SQLAlchemy ORM model for feedback records"""

    __tablename__ = 'feedback'
    # Ids are never reused, even on SQLite
    __table_args__ = {'sqlite_autoincrement': True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    contact = Column(String(255), nullable=False, default="")
    content = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Feedback(id={self.id}, contact='{self.contact}')>"

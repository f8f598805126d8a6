from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .db import Base


class TaskModel(Base):
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(Text)
    description = Column(Text)
    done = Column(Integer)
    reminder = Column(Text)

from sqlalchemy import Column, Integer, Text, func

from .db import Base


class Recipe(Base):
    __tablename__ = "recipes"
    # AUTOINCREMENT keeps SQLite from handing out the id of a removed row
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    ingredience = Column(Text, nullable=False)  # free-form ingredient list
    created_at = Column(
        Text, nullable=False, server_default=func.current_timestamp()
    )
    updated_at = Column(
        Text, nullable=False, server_default=func.current_timestamp()
    )

from sqlalchemy import Column, BigInteger, Integer, Text

from app.core.db import Base

# верхняя граница BIGINT; id и смещения больше этого не помещаются в базу
MAX_BIGINT = 2 ** 63 - 1


class Message(Base):
    __tablename__ = "message"
    # id не переиспользуется после удаления
    __table_args__ = {"sqlite_autoincrement": True}

    # BIGSERIAL в PostgreSQL, INTEGER PRIMARY KEY в SQLite
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    owner = Column(Text, nullable=False, index=True)

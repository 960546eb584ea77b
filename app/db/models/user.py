from sqlalchemy import Column, BigInteger, Integer, Text, ForeignKey, Table
from sqlalchemy.orm import relationship

from app.core.db import Base

_id_type = BigInteger().with_variant(Integer, "sqlite")

user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", _id_type, ForeignKey("user_entity.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", _id_type, ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
)


class Role(Base):
    __tablename__ = "role"

    id = Column(_id_type, primary_key=True, autoincrement=True)
    name = Column(Text, unique=True, nullable=False)


class UserEntity(Base):
    __tablename__ = "user_entity"

    id = Column(_id_type, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True, index=True, nullable=False)
    password = Column(Text, nullable=False)

    # Relationships
    roles = relationship("Role", secondary=user_roles, lazy="selectin")

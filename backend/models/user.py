"""User model definitions."""

from sqlalchemy import Column, Integer, String, Text
from backend.database import Base


class User(Base):
    """Represents a registered account."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(30), unique=True, nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    profile_picture = Column(Text, nullable=True)  # base64

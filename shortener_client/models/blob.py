from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from shortener_client.database.connection import Base


class StoredBlob(Base):
    """Key-value row backing SQLBlobStore"""
    __tablename__ = "stored_blobs"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

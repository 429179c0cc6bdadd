from sqlalchemy import Column, DateTime, String, Text, func

from app.db.base_class import Base


class StorageEntry(Base):
    """One serialized value under a well-known key."""
    __tablename__ = "storage_entries"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)

    # Audit fields
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

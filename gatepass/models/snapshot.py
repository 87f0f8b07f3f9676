# gatepass/models/snapshot.py
"""
Snapshot table for the SQL storage backend.
Holds the whole application state (users + passes) as one JSON document
in a single row. The version counter is bumped on every save.
"""

from sqlalchemy import Column, Integer, DateTime, Text
from gatepass.database import Base


class StoredSnapshot(Base):
    __tablename__ = "snapshots"

    id = Column(Integer, primary_key=True)
    version = Column(Integer, default=0, nullable=False)
    document = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True))

    def __repr__(self):
        return f"<StoredSnapshot {self.id} version={self.version}>"

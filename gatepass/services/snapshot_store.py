# gatepass/services/snapshot_store.py
"""
Snapshot stores: load and save the entire application state as one unit.

  - JsonFileStore:    database.json on disk, rewritten in full on every save
  - SqlSnapshotStore: the same document kept in one row of the snapshots table
  - InMemoryStore:    process-local, for tests and scripting

No partial reads or writes. Each store carries a re-entrant lock that callers
hold across a load → mutate → save cycle.
"""

import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from gatepass.models.snapshot import StoredSnapshot
from gatepass.schemas.snapshot import Snapshot
from gatepass.utils.exceptions import StorageError
from gatepass.utils.logger import get_logger
from gatepass.utils.time_utils import utc_now

logger = get_logger(__name__)


def dump_snapshot(snapshot: Snapshot) -> dict:
    """Serialize to the stored document shape (camelCase, ISO timestamps)."""
    return snapshot.model_dump(mode="json", by_alias=True)


class SnapshotStore(ABC):
    def __init__(self):
        self.lock = threading.RLock()

    @abstractmethod
    def load(self) -> Snapshot:
        ...

    @abstractmethod
    def save(self, snapshot: Snapshot) -> None:
        ...

    def ping(self) -> bool:
        """True if the store can currently be read."""
        try:
            self.load()
            return True
        except StorageError as e:
            logger.error(f"[STORE] Health check failed: {e}")
            return False


class JsonFileStore(SnapshotStore):
    def __init__(self, path: str):
        super().__init__()
        self.path = path

    def load(self) -> Snapshot:
        if not os.path.exists(self.path):
            logger.warning(f"[STORE] {self.path} does not exist yet, starting from an empty snapshot")
            return Snapshot()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Snapshot.model_validate(data)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

    def save(self, snapshot: Snapshot) -> None:
        snapshot.version += 1
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".gatepass-", suffix=".json")
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(dump_snapshot(snapshot), f, indent=2)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.debug(f"[STORE] Wrote {self.path} (version {snapshot.version})")


class SqlSnapshotStore(SnapshotStore):
    SNAPSHOT_ID = 1

    def __init__(self, engine: Engine):
        super().__init__()
        self.engine = engine
        self.Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _row(self, db):
        return db.query(StoredSnapshot).filter(StoredSnapshot.id == self.SNAPSHOT_ID).first()

    def load(self) -> Snapshot:
        db = self.Session()
        try:
            row = self._row(db)
            if not row:
                return Snapshot()
            snapshot = Snapshot.model_validate_json(row.document)
            snapshot.version = row.version
            return snapshot
        except (SQLAlchemyError, ValueError) as e:
            raise StorageError(f"Cannot read snapshot row: {e}") from e
        finally:
            db.close()

    def save(self, snapshot: Snapshot) -> None:
        db = self.Session()
        try:
            row = self._row(db)
            if not row:
                row = StoredSnapshot(id=self.SNAPSHOT_ID, version=0)
                db.add(row)
            new_version = (row.version or 0) + 1
            snapshot.version = new_version
            row.version = new_version
            row.document = json.dumps(dump_snapshot(snapshot))
            row.updated_at = utc_now()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"Cannot write snapshot row: {e}") from e
        finally:
            db.close()
        logger.debug(f"[STORE] Saved snapshot version {new_version}")


class InMemoryStore(SnapshotStore):
    def __init__(self, snapshot: Snapshot = None):
        super().__init__()
        self._snapshot = snapshot.model_copy(deep=True) if snapshot else Snapshot()

    def load(self) -> Snapshot:
        return self._snapshot.model_copy(deep=True)

    def save(self, snapshot: Snapshot) -> None:
        snapshot.version += 1
        self._snapshot = snapshot.model_copy(deep=True)

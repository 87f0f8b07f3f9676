# gatepass/services/pass_service.py
"""
Pass lifecycle: request → moderator decision → gate exit → gate entry,
plus late-return location tracking.

  pending ──decide──▶ approved | rejected
  approved ──exit──▶ out ──entry──▶ back

Lateness is never stored as a state: it is recomputed from the clock on every
location report and every late-list query.

Every mutation runs load → mutate → save while holding the store lock, so two
requests in the same process cannot overwrite each other's update.
"""

from datetime import datetime
from typing import Callable, Optional, Tuple

from gatepass.config import settings
from gatepass.schemas.gate_pass import GatePass, Location, PassStatus
from gatepass.schemas.snapshot import Snapshot
from gatepass.services import pass_queries
from gatepass.services.id_generator import generate_pass_id
from gatepass.services.snapshot_store import SnapshotStore
from gatepass.utils.exceptions import InvalidPassStateError, PassNotFoundError
from gatepass.utils.logger import get_logger
from gatepass.utils.time_utils import utc_now

logger = get_logger(__name__)


class PassService:
    """Owns the state machine for gate passes held in a snapshot store."""

    def __init__(
        self,
        store: SnapshotStore,
        clock: Callable[[], datetime] = utc_now,
        strict_transitions: Optional[bool] = None,
    ):
        self.store = store
        self.clock = clock
        self.strict_transitions = (
            settings.STRICT_TRANSITIONS if strict_transitions is None else strict_transitions
        )

    # ── Helpers ──────────────────────────────────────────────────────────

    @staticmethod
    def _require(snapshot: Snapshot, pass_id: str) -> GatePass:
        gate_pass = snapshot.find_pass(pass_id)
        if gate_pass is None:
            logger.warning(f"[PASS] Unknown pass id {pass_id}")
            raise PassNotFoundError(pass_id)
        return gate_pass

    def _refuse(self, gate_pass: GatePass, message: str):
        logger.warning(f"[GATE] Refused on pass {gate_pass.id} (status={gate_pass.status}): {message}")
        raise InvalidPassStateError(message)

    # ── Student ──────────────────────────────────────────────────────────

    def create_pass(
        self,
        student_id: str,
        student_name: str,
        reason: str,
        destination: str,
        expected_return: datetime,
    ) -> GatePass:
        with self.store.lock:
            snapshot = self.store.load()
            gate_pass = GatePass(
                id=generate_pass_id(p.id for p in snapshot.passes),
                student_id=student_id,
                student_name=student_name,
                reason=reason,
                destination=destination,
                expected_return=expected_return,
                status=PassStatus.PENDING.value,
                requested_at=self.clock(),
            )
            snapshot.passes.append(gate_pass)
            self.store.save(snapshot)

        logger.info(f"[PASS] Created {gate_pass.id} for student={student_id} → {destination}")
        return gate_pass

    # ── Moderator ────────────────────────────────────────────────────────

    def decide_pass(
        self,
        pass_id: str,
        status: str,
        remarks: Optional[str] = None,
        moderator_name: Optional[str] = None,
    ) -> GatePass:
        """Attach a moderator decision. The status value is trusted as given."""
        with self.store.lock:
            snapshot = self.store.load()
            gate_pass = self._require(snapshot, pass_id)
            if self.strict_transitions and gate_pass.status != PassStatus.PENDING:
                self._refuse(gate_pass, "Pass has already been decided")

            gate_pass.status = status.value if isinstance(status, PassStatus) else status
            gate_pass.moderator_remarks = remarks or ""
            gate_pass.approved_by = moderator_name
            gate_pass.approved_at = self.clock()
            self.store.save(snapshot)

        logger.info(f"[DECISION] Pass {pass_id} → {gate_pass.status} by {moderator_name}")
        return gate_pass

    # ── Gatekeeper ───────────────────────────────────────────────────────

    def record_exit(self, pass_id: str) -> GatePass:
        with self.store.lock:
            snapshot = self.store.load()
            gate_pass = self._require(snapshot, pass_id)
            if gate_pass.status != PassStatus.APPROVED:
                self._refuse(gate_pass, "Pass is not approved")
            if self.strict_transitions and gate_pass.exit_time is not None:
                self._refuse(gate_pass, "Student has already exited")

            gate_pass.exit_time = self.clock()
            self.store.save(snapshot)

        logger.info(f"[GATE] EXIT pass={pass_id} student={gate_pass.student_id}")
        return gate_pass

    def record_entry(self, pass_id: str) -> GatePass:
        with self.store.lock:
            snapshot = self.store.load()
            gate_pass = self._require(snapshot, pass_id)
            if gate_pass.exit_time is None:
                self._refuse(gate_pass, "Student has not exited yet")
            if self.strict_transitions and gate_pass.entry_time is not None:
                self._refuse(gate_pass, "Student has already entered")

            gate_pass.entry_time = self.clock()
            self.store.save(snapshot)

        logger.info(f"[GATE] ENTRY pass={pass_id} student={gate_pass.student_id}")
        return gate_pass

    # ── Tracking ─────────────────────────────────────────────────────────

    def report_location(
        self,
        pass_id: str,
        latitude: float,
        longitude: float,
        timestamp: Optional[datetime] = None,
    ) -> Tuple[bool, GatePass]:
        """
        Record a location ping, but only while the student is out and overdue.
        Returns (recorded, pass). Not being late is a normal outcome, not an error.
        """
        with self.store.lock:
            snapshot = self.store.load()
            gate_pass = self._require(snapshot, pass_id)
            now = self.clock()
            if not pass_queries.is_late(gate_pass, now):
                logger.debug(f"[TRACK] Pass {pass_id} not late, location ignored")
                return False, gate_pass

            gate_pass.location = Location(
                latitude=latitude,
                longitude=longitude,
                timestamp=timestamp or now,
                is_late=True,
            )
            self.store.save(snapshot)

        logger.warning(
            f"[TRACK] Late student={gate_pass.student_id} pass={pass_id} at ({latitude}, {longitude})"
        )
        return True, gate_pass

    # ── Reads ────────────────────────────────────────────────────────────

    def get_pass(self, pass_id: str) -> GatePass:
        return self._require(self.store.load(), pass_id)

    def list_by_student(self, student_id: str) -> list[GatePass]:
        return pass_queries.list_by_student(self.store.load().passes, student_id)

    def list_pending(self) -> list[GatePass]:
        return pass_queries.list_pending(self.store.load().passes)

    def list_all(self) -> list[GatePass]:
        return pass_queries.list_all(self.store.load().passes)

    def list_active(self) -> list[GatePass]:
        return pass_queries.list_active(self.store.load().passes)

    def list_late(self) -> list[GatePass]:
        return pass_queries.list_late(self.store.load().passes, self.clock())

# gatepass/services/pass_queries.py
"""
Read-only views over the pass collection.
Each view is a filter that keeps the collection's order; none mutate.
"""

from datetime import datetime

from gatepass.schemas.gate_pass import GatePass, PassStatus


def is_active(p: GatePass) -> bool:
    """Approved and not yet back in (covers both not-yet-exited and out)."""
    return p.status == PassStatus.APPROVED and p.entry_time is None


def is_late(p: GatePass, now: datetime) -> bool:
    """Out past expected return: approved, exited, not entered, now > expectedReturn."""
    return (
        p.status == PassStatus.APPROVED
        and p.exit_time is not None
        and p.entry_time is None
        and now > p.expected_return
    )


def list_by_student(passes: list[GatePass], student_id: str) -> list[GatePass]:
    return [p for p in passes if p.student_id == student_id]


def list_pending(passes: list[GatePass]) -> list[GatePass]:
    return [p for p in passes if p.status == PassStatus.PENDING]


def list_all(passes: list[GatePass]) -> list[GatePass]:
    return list(passes)


def list_active(passes: list[GatePass]) -> list[GatePass]:
    return [p for p in passes if is_active(p)]


def list_late(passes: list[GatePass], now: datetime) -> list[GatePass]:
    return [p for p in passes if is_late(p, now)]

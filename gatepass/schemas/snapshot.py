# gatepass/schemas/snapshot.py
"""The whole persisted state: every user and every pass, read and written as one unit."""

from pydantic import BaseModel

from gatepass.schemas.gate_pass import GatePass
from gatepass.schemas.user import User


class Snapshot(BaseModel):
    users: list[User] = []
    passes: list[GatePass] = []
    version: int = 0

    def find_pass(self, pass_id: str):
        """Return the pass with this id, or None."""
        for p in self.passes:
            if p.id == pass_id:
                return p
        return None

# gatepass/services/id_generator.py
"""Opaque, collision-checked identifiers for new passes."""

import uuid
from typing import Iterable


def generate_pass_id(existing_ids: Iterable[str] = ()) -> str:
    """Return a UUID4 hex id not already present in existing_ids."""
    taken = set(existing_ids)
    while True:
        candidate = uuid.uuid4().hex
        if candidate not in taken:
            return candidate

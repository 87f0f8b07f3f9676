# gatepass/utils/exceptions.py
"""
Error taxonomy for the gate-pass workflow.
Domain errors carry the HTTP status the API boundary answers with.
"""


class GatePassError(Exception):
    """Base exception for gate-pass domain errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PassNotFoundError(GatePassError):
    """Raised when a referenced pass id is absent."""

    status_code = 404

    def __init__(self, pass_id: str, message: str = "Pass not found"):
        super().__init__(message)
        self.pass_id = pass_id


class InvalidPassStateError(GatePassError):
    """Raised when an operation is attempted from a disallowed pass state."""

    status_code = 400


class AuthFailedError(GatePassError):
    """Raised when a username/password pair does not match any user."""

    status_code = 401


class StorageError(Exception):
    """Raised when the persisted snapshot cannot be read or written."""

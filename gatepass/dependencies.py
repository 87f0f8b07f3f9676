# gatepass/dependencies.py
"""FastAPI dependencies. Tests override get_store / get_clock."""

from fastapi import Depends

from gatepass.database import get_store
from gatepass.services.auth_service import AuthService
from gatepass.services.pass_service import PassService
from gatepass.utils.time_utils import utc_now


def get_clock():
    return utc_now


def get_pass_service(store=Depends(get_store), clock=Depends(get_clock)) -> PassService:
    return PassService(store, clock=clock)


def get_auth_service() -> AuthService:
    return AuthService()

# gatepass/routers/passes.py
"""
Pass workflow endpoints.
Student:    create + list own passes
Moderator:  pending / all lists + approve or reject
Gatekeeper: look up by id, active list, mark exit / entry

Fixed paths (/passes/pending, /passes/all, ...) are declared before
/passes/{pass_id} so the path parameter does not capture them.
"""

from fastapi import APIRouter, Depends

from gatepass.dependencies import get_pass_service
from gatepass.schemas.gate_pass import PassCreate, PassDecision
from gatepass.schemas.responses import ErrorResponse, PassListResponse, PassResponse
from gatepass.services.pass_service import PassService

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}
NOT_FOUND_OR_INVALID = {404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}}


# ── Student ──────────────────────────────────────────────────────────────────

@router.post("/passes", response_model=PassResponse, summary="Request a gate pass")
def create_pass(body: PassCreate, service: PassService = Depends(get_pass_service)):
    gate_pass = service.create_pass(
        student_id=body.student_id,
        student_name=body.student_name,
        reason=body.reason,
        destination=body.destination,
        expected_return=body.expected_return,
    )
    return PassResponse(pass_=gate_pass)


@router.get("/passes/student/{student_id}", response_model=PassListResponse, summary="A student's passes")
def list_student_passes(student_id: str, service: PassService = Depends(get_pass_service)):
    return PassListResponse(passes=service.list_by_student(student_id))


# ── Moderator ────────────────────────────────────────────────────────────────

@router.get("/passes/pending", response_model=PassListResponse, summary="Passes awaiting a decision")
def list_pending(service: PassService = Depends(get_pass_service)):
    return PassListResponse(passes=service.list_pending())


@router.get("/passes/all", response_model=PassListResponse, summary="Every pass")
def list_all(service: PassService = Depends(get_pass_service)):
    return PassListResponse(passes=service.list_all())


# ── Gatekeeper ───────────────────────────────────────────────────────────────

@router.get("/passes/active", response_model=PassListResponse, summary="Approved passes not yet back in")
def list_active(service: PassService = Depends(get_pass_service)):
    return PassListResponse(passes=service.list_active())


@router.get("/passes/{pass_id}", response_model=PassResponse, responses=NOT_FOUND, summary="Look up a pass")
def get_pass(pass_id: str, service: PassService = Depends(get_pass_service)):
    return PassResponse(pass_=service.get_pass(pass_id))


@router.put("/passes/{pass_id}/status", response_model=PassResponse, responses=NOT_FOUND,
            summary="Approve or reject a pass")
def decide_pass(pass_id: str, body: PassDecision, service: PassService = Depends(get_pass_service)):
    gate_pass = service.decide_pass(pass_id, body.status, body.remarks, body.moderator_name)
    return PassResponse(pass_=gate_pass)


@router.put("/passes/{pass_id}/exit", response_model=PassResponse, responses=NOT_FOUND_OR_INVALID,
            summary="Mark the student as gone out")
def mark_exit(pass_id: str, service: PassService = Depends(get_pass_service)):
    """400 if the pass is not approved."""
    return PassResponse(pass_=service.record_exit(pass_id))


@router.put("/passes/{pass_id}/entry", response_model=PassResponse, responses=NOT_FOUND_OR_INVALID,
            summary="Mark the student as back in")
def mark_entry(pass_id: str, service: PassService = Depends(get_pass_service)):
    """400 if the student has not exited yet."""
    return PassResponse(pass_=service.record_entry(pass_id))

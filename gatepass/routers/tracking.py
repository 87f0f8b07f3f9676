# gatepass/routers/tracking.py
"""Late-return tracking: location pings and the late list."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gatepass.dependencies import get_pass_service
from gatepass.schemas.gate_pass import LocationReport
from gatepass.schemas.responses import ErrorResponse, LocationResponse, PassListResponse
from gatepass.services.pass_service import PassService

router = APIRouter()


@router.get("/passes/late", response_model=PassListResponse, summary="Students out past expected return")
def list_late(service: PassService = Depends(get_pass_service)):
    return PassListResponse(passes=service.list_late())


@router.post("/passes/{pass_id}/location", response_model=LocationResponse,
             responses={404: {"model": ErrorResponse}}, summary="Report a student's location")
def report_location(pass_id: str, body: LocationReport, service: PassService = Depends(get_pass_service)):
    """
    Clients report periodically. The location is stored only while the student
    is out and overdue; otherwise the call answers success=false with HTTP 200.
    """
    recorded, gate_pass = service.report_location(pass_id, body.latitude, body.longitude, body.timestamp)
    if recorded:
        return LocationResponse(success=True, message="Location tracked", pass_=gate_pass)
    # No pass key when nothing was recorded
    return JSONResponse(content={"success": False, "message": "Not late, location not tracked"})

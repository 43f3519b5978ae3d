# This project was developed with assistance from AI tools.
"""Health check routes."""

from fastapi import APIRouter

from ..schemas import ServiceHealth

router = APIRouter()


@router.get("/", response_model=list[ServiceHealth])
async def health_check() -> list[ServiceHealth]:
    """Report service health. The calculator has no backing services to probe."""
    return [ServiceHealth(name="API", status="healthy")]

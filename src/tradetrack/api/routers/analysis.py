"""Portfolio analysis endpoints."""

from fastapi import APIRouter, Depends

from tradetrack.api.deps import get_analysis_service
from tradetrack.api.schemas import AllocationResponse
from tradetrack.services import AnalysisService

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.get("/allocation", response_model=AllocationResponse)
def get_allocation(
    analysis: AnalysisService = Depends(get_analysis_service),
) -> AllocationResponse:
    """Get portfolio allocation breakdown."""
    return AllocationResponse.model_validate(analysis.allocation())

# sffhub/routers/intake.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from ..deps import get_request_manager
from ..models import BudgetRange, BuyerRequest, NeedType, Platform, Turnaround
from ..services.buyer_requests import RequestManager

router = APIRouter(prefix="/intake", tags=["intake"])


@router.get("/options")
def intake_options():
    """Allowed values for the public request form."""
    return {
        "need_type": [v.value for v in NeedType],
        "platforms": [v.value for v in Platform],
        "turnaround": [v.value for v in Turnaround],
        "budget_range": [v.value for v in BudgetRange],
    }


# Raw body on purpose: RequestManager.submit does the validation so the message
# is the same whether the form or another caller submits.
@router.post("", status_code=201, response_model=BuyerRequest)
def submit_request(
    payload: Dict[str, Any] = Body(...),
    requests: RequestManager = Depends(get_request_manager),
):
    return requests.submit(payload)

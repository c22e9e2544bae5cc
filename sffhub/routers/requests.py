# sffhub/routers/requests.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from ..auth import current_user
from ..deps import get_request_manager
from ..models import BuyerRequest, ConversionResult, RenderedMessage, RequestStatusIn, RequestTiersIn
from ..services import messages
from ..services.buyer_requests import RequestManager

router = APIRouter(
    prefix="/admin/requests",
    tags=["requests"],
    dependencies=[Depends(current_user)],
)


# ──────────────────────────────────────────────────────────────────────────────
# GET /admin/requests (newest first)
# ──────────────────────────────────────────────────────────────────────────────
@router.get("", response_model=List[BuyerRequest])
def list_requests(requests: RequestManager = Depends(get_request_manager)):
    return requests.list()


@router.get("/{request_id}", response_model=BuyerRequest)
def get_request(request_id: UUID, requests: RequestManager = Depends(get_request_manager)):
    return requests.get(request_id)


@router.patch("/{request_id}/status")
def update_request_status(
    request_id: UUID,
    payload: RequestStatusIn,
    requests: RequestManager = Depends(get_request_manager),
):
    requests.set_status(request_id, payload.status)
    return {"success": True}


@router.patch("/{request_id}/tiers")
def update_request_tiers(
    request_id: UUID,
    payload: RequestTiersIn,
    requests: RequestManager = Depends(get_request_manager),
):
    requests.set_tiers(request_id, payload.complexity_suggested, payload.speed_tier)
    return {"success": True}


# ──────────────────────────────────────────────────────────────────────────────
# POST /admin/requests/{id}/convert: job + checklist, request marked WON
# ──────────────────────────────────────────────────────────────────────────────
@router.post("/{request_id}/convert", status_code=201, response_model=ConversionResult)
def convert_request(request_id: UUID, requests: RequestManager = Depends(get_request_manager)):
    return requests.convert_to_job(request_id)


@router.get("/{request_id}/quote-email", response_model=RenderedMessage)
def quote_email(request_id: UUID, requests: RequestManager = Depends(get_request_manager)):
    request = requests.get(request_id)
    return RenderedMessage(
        subject=f"Your {request.need_type.value} editing quote",
        body=messages.quote_email(request),
    )

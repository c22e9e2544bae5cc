# sffhub/services/buyer_requests.py
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union
from uuid import UUID

import pydantic

from ..errors import NotFoundError, StorageError, ValidationError
from ..models import (
    CHECKLIST_FLAGS,
    BuyerRequest,
    ComplexityTier,
    ConversionResult,
    JobStatus,
    RequestIn,
    RequestStatus,
    SpeedTier,
)
from ..store import CHECKLIST_TABLE, JOBS_TABLE, REQUESTS_TABLE
from .tiers import classify

log = logging.getLogger("uvicorn.error")


def _describe(exc: pydantic.ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"]) or "request"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


class RequestManager:
    """Owns ``buyer_requests`` rows and the request → job conversion."""

    def __init__(self, store):
        self.store = store

    def list(self) -> List[BuyerRequest]:
        rows = self.store.select(REQUESTS_TABLE, order="created_at", desc=True)
        return [BuyerRequest.model_validate(r) for r in rows]

    def get(self, request_id: Union[UUID, str]) -> BuyerRequest:
        row = self.store.select_one(REQUESTS_TABLE, {"id": request_id})
        if row is None:
            raise NotFoundError("Request", str(request_id))
        return BuyerRequest.model_validate(row)

    def submit(self, fields: Mapping[str, Any]) -> BuyerRequest:
        try:
            payload = RequestIn.model_validate(dict(fields))
        except pydantic.ValidationError as e:
            raise ValidationError(_describe(e), details=e.errors(include_url=False, include_context=False)) from e

        complexity, speed = classify(
            payload.need_type,
            payload.volume_per_week,
            payload.turnaround,
            payload.notes,
        )
        row = payload.model_dump(mode="json")
        row.update({
            "status": RequestStatus.NEW.value,
            "complexity_suggested": complexity.value,
            "speed_tier": speed.value,
        })
        created = self.store.insert(REQUESTS_TABLE, row)
        log.info(
            f"Request {created.get('id')} submitted by {payload.email} "
            f"({payload.need_type.value}, {complexity.value}/{speed.value})"
        )
        return BuyerRequest.model_validate(created)

    def set_status(self, request_id: Union[UUID, str], status: RequestStatus) -> None:
        # any status may follow any other
        status = RequestStatus(status)
        self.store.update(REQUESTS_TABLE, {"status": status.value}, {"id": request_id})
        log.info(f"Request {request_id} status -> {status.value}")

    def set_tiers(
        self,
        request_id: Union[UUID, str],
        complexity: ComplexityTier,
        speed: SpeedTier,
    ) -> None:
        values = {
            "complexity_suggested": ComplexityTier(complexity).value,
            "speed_tier": SpeedTier(speed).value,
        }
        self.store.update(REQUESTS_TABLE, values, {"id": request_id})

    def convert_to_job(self, request_id: Union[UUID, str]) -> ConversionResult:
        """Create a job and its checklist from a request, then mark the request WON.

        Not a transaction. Steps run in order:

        1. the job insert fails: nothing was written, the error is raised;
        2. the checklist insert fails: the new job is deleted again and the
           error is raised;
        3. marking the request WON fails: logged only, the job stands and the
           result carries ``request_marked_won=False``.
        """
        request = self.get(request_id)

        job_row = self.store.insert(JOBS_TABLE, {
            "request_id": str(request.id),
            "buyer_name": request.name,
            "buyer_email": request.email,
            "service": request.need_type.value,
            "rush": request.speed_tier == SpeedTier.RUSH,
            "status": JobStatus.INTAKE_PENDING.value,
        })
        job_id = job_row["id"]

        checklist = {flag: False for flag in CHECKLIST_FLAGS}
        checklist["job_id"] = job_id
        try:
            self.store.insert(CHECKLIST_TABLE, checklist)
        except StorageError:
            log.warning(f"Checklist insert failed for job {job_id}; removing job")
            try:
                self.store.delete(JOBS_TABLE, {"id": job_id})
            except StorageError as cleanup_err:
                log.error(f"Job {job_id} left without checklist: {cleanup_err.message}")
            raise

        marked = True
        try:
            self.store.update(REQUESTS_TABLE, {"status": RequestStatus.WON.value}, {"id": request.id})
        except StorageError as e:
            marked = False
            log.warning(f"Job {job_id} created but request {request.id} not marked WON: {e.message}")

        log.info(f"Request {request.id} converted to job {job_id}")
        return ConversionResult(job_id=job_id, request_marked_won=marked)

# sffhub/services/jobs.py
from __future__ import annotations

import logging
from typing import List, Optional, Union
from uuid import UUID

from ..errors import NotFoundError
from ..models import ChecklistUpdate, Job, JobChecklist, JobStatus, JobUpdate
from ..store import CHECKLIST_TABLE, JOBS_TABLE

log = logging.getLogger("uvicorn.error")


class JobManager:
    """Owns ``jobs`` and ``job_checklist`` rows.

    Status is a flat enum and checklist flags are independent of each other and
    of the status; every write is a plain overwrite (last write wins).
    """

    def __init__(self, store):
        self.store = store

    def list(self) -> List[Job]:
        rows = self.store.select(JOBS_TABLE, order="created_at", desc=True)
        return [Job.model_validate(r) for r in rows]

    def get(self, job_id: Union[UUID, str]) -> Job:
        row = self.store.select_one(JOBS_TABLE, {"id": job_id})
        if row is None:
            raise NotFoundError("Job", str(job_id))
        return Job.model_validate(row)

    def get_checklist(self, job_id: Union[UUID, str]) -> Optional[JobChecklist]:
        row = self.store.select_one(CHECKLIST_TABLE, {"job_id": job_id})
        return JobChecklist.model_validate(row) if row else None

    def set_status(self, job_id: Union[UUID, str], status: JobStatus) -> None:
        status = JobStatus(status)
        self.store.update(JOBS_TABLE, {"status": status.value}, {"id": job_id})
        log.info(f"Job {job_id} status -> {status.value}")

    def update(self, job_id: Union[UUID, str], fields: JobUpdate) -> None:
        # no value checks: negative prices and past due dates are accepted
        values = fields.model_dump(mode="json", exclude_unset=True)
        if not values:
            return
        self.store.update(JOBS_TABLE, values, {"id": job_id})
        log.info(f"Job {job_id} updated: {', '.join(sorted(values))}")

    def update_checklist(self, job_id: Union[UUID, str], flags: ChecklistUpdate) -> None:
        values = flags.model_dump(exclude_none=True)
        if not values:
            return
        self.store.update(CHECKLIST_TABLE, values, {"job_id": job_id})

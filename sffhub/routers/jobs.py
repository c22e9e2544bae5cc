# sffhub/routers/jobs.py
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from ..auth import current_user
from ..deps import get_job_manager
from ..models import ChecklistUpdate, Job, JobChecklist, JobStatusIn, JobUpdate, RenderedMessage
from ..services import messages
from ..services.jobs import JobManager

router = APIRouter(
    prefix="/admin/jobs",
    tags=["jobs"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=List[Job])
def list_jobs(jobs: JobManager = Depends(get_job_manager)):
    return jobs.list()


@router.get("/{job_id}", response_model=Job)
def get_job(job_id: UUID, jobs: JobManager = Depends(get_job_manager)):
    return jobs.get(job_id)


@router.patch("/{job_id}")
def update_job(job_id: UUID, payload: JobUpdate, jobs: JobManager = Depends(get_job_manager)):
    jobs.update(job_id, payload)
    return {"success": True}


@router.patch("/{job_id}/status")
def update_job_status(job_id: UUID, payload: JobStatusIn, jobs: JobManager = Depends(get_job_manager)):
    jobs.set_status(job_id, payload.status)
    return {"success": True}


# ──────────────────────────────────────────────────────────────────────────────
# Checklist (null when the job has no checklist row)
# ──────────────────────────────────────────────────────────────────────────────
@router.get("/{job_id}/checklist", response_model=Optional[JobChecklist])
def get_checklist(job_id: UUID, jobs: JobManager = Depends(get_job_manager)):
    return jobs.get_checklist(job_id)


@router.patch("/{job_id}/checklist")
def update_checklist(job_id: UUID, payload: ChecklistUpdate, jobs: JobManager = Depends(get_job_manager)):
    jobs.update_checklist(job_id, payload)
    return {"success": True}


# ──────────────────────────────────────────────────────────────────────────────
# Canned buyer messages
# ──────────────────────────────────────────────────────────────────────────────
@router.get("/{job_id}/client-update", response_model=RenderedMessage)
def client_update(job_id: UUID, jobs: JobManager = Depends(get_job_manager)):
    job = jobs.get(job_id)
    return RenderedMessage(subject=f"Update on your {job.service} project", body=messages.client_update(job))


@router.get("/{job_id}/delivery-message", response_model=RenderedMessage)
def delivery_message(job_id: UUID, jobs: JobManager = Depends(get_job_manager)):
    job = jobs.get(job_id)
    return RenderedMessage(subject=f"Your {job.service} edits are ready", body=messages.delivery_message(job))

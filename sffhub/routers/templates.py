# sffhub/routers/templates.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from ..auth import current_user
from ..deps import get_template_manager
from ..models import RenderedMessage, RenderIn, Template, TemplateIn
from ..services import messages
from ..services.templates import TemplateManager

router = APIRouter(
    prefix="/admin/templates",
    tags=["templates"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=List[Template])
def list_templates(templates: TemplateManager = Depends(get_template_manager)):
    return templates.list()


@router.get("/placeholders")
def list_placeholders():
    return {"placeholders": [f"{{{name}}}" for name in messages.PLACEHOLDERS]}


@router.post("", status_code=201, response_model=Template)
def create_template(payload: TemplateIn, templates: TemplateManager = Depends(get_template_manager)):
    return templates.create(payload.name, payload.subject, payload.body)


@router.get("/{template_id}", response_model=Template)
def get_template(template_id: UUID, templates: TemplateManager = Depends(get_template_manager)):
    return templates.get(template_id)


@router.put("/{template_id}")
def update_template(
    template_id: UUID,
    payload: TemplateIn,
    templates: TemplateManager = Depends(get_template_manager),
):
    templates.update(template_id, payload.name, payload.subject, payload.body)
    return {"success": True}


@router.delete("/{template_id}")
def delete_template(template_id: UUID, templates: TemplateManager = Depends(get_template_manager)):
    templates.delete(template_id)
    return {"success": True}


@router.post("/{template_id}/render", response_model=RenderedMessage)
def render_template(
    template_id: UUID,
    payload: RenderIn,
    templates: TemplateManager = Depends(get_template_manager),
):
    template = templates.get(template_id)
    subject = messages.render(template.subject, payload.values) if template.subject else None
    return RenderedMessage(subject=subject, body=messages.render(template.body, payload.values))

"""Placeholder rendering and the built-in buyer messages."""

from datetime import datetime, timezone
from uuid import uuid4

from sffhub.models import BuyerRequest, Job
from sffhub.services import messages


def _request(**overrides):
    data = {
        "id": uuid4(),
        "name": "Dana",
        "email": "dana@example.com",
        "need_type": "Captions",
        "platforms": ["TikTok", "Shorts"],
        "volume_per_week": 4,
        "turnaround": "24-48h",
        "budget_range": "<200",
        "status": "NEW",
    }
    data.update(overrides)
    return BuyerRequest.model_validate(data)


def _job(**overrides):
    data = {
        "id": uuid4(),
        "status": "IN_PROGRESS",
        "buyer_name": "Dana",
        "buyer_email": "dana@example.com",
        "service": "Captions",
    }
    data.update(overrides)
    return Job.model_validate(data)


def test_render_substitutes_known_tokens():
    assert messages.render("Hi {name}, {price} due", {"name": "Dana", "price": 250}) == "Hi Dana, 250 due"


def test_render_leaves_unknown_and_malformed_tokens():
    body = "Hi {name} {question} {not valid} {"
    assert messages.render(body, {"name": "Dana"}) == "Hi Dana {question} {not valid} {"


def test_render_none_is_empty():
    assert messages.render("[{delivery_link}]", {"delivery_link": None}) == "[]"


def test_quote_email():
    body = messages.quote_email(_request())

    assert body.startswith("Hi Dana,")
    assert "- Service: Captions" in body
    assert "- Volume: 4 per week" in body
    assert "- Platforms: TikTok, Shorts" in body
    assert messages.ORDER_URL in body
    assert "{" not in body


def test_client_update_with_and_without_due_date():
    due = datetime(2024, 5, 7, tzinfo=timezone.utc)
    assert "Due: May 07, 2024" in messages.client_update(_job(due_at=due))
    assert "Due:" not in messages.client_update(_job())
    assert "Status: IN_PROGRESS" in messages.client_update(_job())


def test_delivery_message_link_fallback():
    assert "Download: [INSERT LINK]" in messages.delivery_message(_job())
    assert "Download: https://d.example/x" in messages.delivery_message(_job(delivery_link="https://d.example/x"))

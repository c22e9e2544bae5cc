# sffhub/services/messages.py
"""``{token}`` substitution plus the canned buyer messages the admin copies out."""
from __future__ import annotations

import re
from typing import Any, Dict, Mapping

from ..models import BuyerRequest, Job

ORDER_URL = "https://shortformfactory.com/order"
SIGNATURE = "Best,\nShortFormFactory Team"

PLACEHOLDERS = (
    "name",
    "service",
    "turnaround",
    "price",
    "next_step",
    "order_url",
    "volume_per_week",
    "question",
    "delivery_link",
)

_TOKEN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def render(body: str, values: Mapping[str, Any]) -> str:
    """Replace ``{name}`` tokens found in ``values``; leave every other token alone."""

    def sub(match: re.Match) -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        value = values[key]
        return "" if value is None else str(value)

    return _TOKEN.sub(sub, body)


def request_values(request: BuyerRequest) -> Dict[str, Any]:
    return {
        "name": request.name,
        "email": request.email,
        "company": request.company,
        "service": request.need_type.value,
        "turnaround": request.turnaround.value,
        "volume_per_week": request.volume_per_week,
        "platforms": ", ".join(p.value for p in request.platforms),
        "order_url": ORDER_URL,
    }


def job_values(job: Job) -> Dict[str, Any]:
    return {
        "name": job.buyer_name,
        "email": job.buyer_email,
        "service": job.service,
        "status": job.status.value,
        "due_date": job.due_at.strftime("%b %d, %Y") if job.due_at else None,
        "price": job.buyer_price,
        "delivery_link": job.delivery_link,
        "order_url": ORDER_URL,
    }


QUOTE_EMAIL = f"""Hi {{name}},

Thanks for reaching out about {{service}} editing!

Based on your needs:
- Service: {{service}}
- Turnaround: {{turnaround}}
- Volume: {{volume_per_week}} per week
- Platforms: {{platforms}}

Price: [INSERT PRICE]

[INSERT NEXT STEP]

Ready to move forward? Order here: {{order_url}}

Questions? Reply to this email.

{SIGNATURE}"""

CLIENT_UPDATE = f"""Hi {{name}},

Quick update on your {{service}} project:

Status: {{status}}
{{due_line}}

[ADD YOUR UPDATE HERE]

Let me know if you have any questions!

{SIGNATURE}"""

DELIVERY_MESSAGE = f"""Hi {{name}},

Your {{service}} edits are complete!

Download: {{delivery_link}}

Please review and let me know if you need any revisions (1 round included).

Timeline for revisions: 24-48 hours

Happy with the result? Would love a testimonial!

{SIGNATURE}"""


def quote_email(request: BuyerRequest) -> str:
    return render(QUOTE_EMAIL, request_values(request))


def client_update(job: Job) -> str:
    values = job_values(job)
    values["due_line"] = f"Due: {values['due_date']}" if values["due_date"] else ""
    return render(CLIENT_UPDATE, values)


def delivery_message(job: Job) -> str:
    values = job_values(job)
    values["delivery_link"] = job.delivery_link or "[INSERT LINK]"
    return render(DELIVERY_MESSAGE, values)

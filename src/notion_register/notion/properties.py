"""Pure functions mapping a RegistrationRequest to the pages.create body."""

from notion_register.models import RegistrationRequest

TITLE_PROPERTY = "Name"


def build_title_property(title: str) -> dict:
    """Wrap title in a single-text-block title property. No splitting or trimming."""
    return {"title": [{"text": {"content": title}}]}


def build_page_payload(request: RegistrationRequest) -> dict:
    """Build the JSON-ready body for POST /v1/pages.

    The parent is the request's database and the only property set is the
    "Name" title column.
    """
    return {
        "parent": {"database_id": request.database_id},
        "properties": {
            TITLE_PROPERTY: build_title_property(request.title),
        },
    }

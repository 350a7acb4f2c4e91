"""Notion output: page payload building and the record client."""

from notion_register.notion.client import NOTION_API_VERSION, NOTION_PAGES_URL, NotionClient
from notion_register.notion.properties import build_page_payload, build_title_property

__all__ = [
    "build_page_payload",
    "build_title_property",
    "NOTION_API_VERSION",
    "NOTION_PAGES_URL",
    "NotionClient",
]

"""Register a title as a new page in a Notion database."""

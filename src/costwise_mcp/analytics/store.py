"""
Read-only access to the external item store.

The store file is either a plain list of item objects or a backup export
of the form {"items": [...], "settings": {...}, "reminders": [...]}.
"""

import json
import logging
import os
from typing import Any, List, Optional

from pydantic import ValidationError

from .models import Item

logger = logging.getLogger(__name__)

# Item store location (working directory unless overridden)
ITEMS_FILE = os.getenv("COSTWISE_ITEMS_FILE", "costwise_items.json")


class ItemStoreError(Exception):
    """The item store exists but cannot be read as an item collection."""


def get_items_path() -> str:
    """Get the full path to the item store file."""
    return ITEMS_FILE


def parse_items(payload: Any) -> List[Item]:
    """
    Validate raw store records into Item values.

    Records that fail validation are skipped with a warning so one bad
    record does not hide the rest of the collection.

    Args:
        payload: A list of records or an export dict with an 'items' key

    Returns:
        List of valid items in store order

    Raises:
        ItemStoreError: If the payload is not a list of records
    """
    if isinstance(payload, dict):
        payload = payload.get('items', [])
    if not isinstance(payload, list):
        raise ItemStoreError(
            f"Expected a list of items, got {type(payload).__name__}"
        )

    items = []
    for index, record in enumerate(payload):
        try:
            items.append(Item.model_validate(record))
        except ValidationError as e:
            record_id = record.get('id') if isinstance(record, dict) else None
            fields = ['.'.join(str(part) for part in err['loc']) or '<record>'
                      for err in e.errors()]
            logger.warning(
                "Skipping invalid item record %s (id=%s): bad %s",
                index, record_id, ', '.join(fields)
            )
    return items


def load_items(path: Optional[str] = None) -> List[Item]:
    """
    Load the item collection from the store file.

    A missing file is an empty collection.

    Args:
        path: Store file, defaults to ITEMS_FILE

    Returns:
        List of items

    Raises:
        ItemStoreError: If the file is not valid JSON or not an item list
    """
    path = path or get_items_path()
    if not os.path.exists(path):
        logger.info("Item store %s not found, using an empty collection", path)
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise ItemStoreError(f"Item store {path} is not valid JSON: {e}") from e

    return parse_items(payload)

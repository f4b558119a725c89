"""Shared fixtures for the Costwise test suite."""

import itertools
import json
from datetime import date

import pytest

from costwise_mcp.analytics import config as config_module
from costwise_mcp.analytics import store as store_module
from costwise_mcp.analytics.models import CalculationType, Item, ItemStatus

_ids = itertools.count(1)


@pytest.fixture
def today():
    """Fixed reference day used throughout the tests."""
    return date(2024, 3, 15)


@pytest.fixture
def make_item():
    """Factory for Item records with sensible defaults."""

    def _make(**overrides):
        values = {
            'id': f"item-{next(_ids)}",
            'name': 'Test Item',
            'total_cost': 100.0,
            'quantity': 1,
            'purchase_date': date(2024, 1, 1),
            'calculation_type': CalculationType.PER_DAY,
            'usage_days': 30,
            'status': ItemStatus.ACTIVE,
        }
        values.update(overrides)
        return Item(**values)

    return _make


@pytest.fixture
def isolated_files(tmp_path, monkeypatch):
    """Point the item store and config file at a temp directory."""
    items_file = tmp_path / "items.json"
    config_file = tmp_path / "preferences.json"
    monkeypatch.setattr(store_module, 'ITEMS_FILE', str(items_file))
    monkeypatch.setattr(config_module, 'CONFIG_FILE', str(config_file))
    monkeypatch.setattr(config_module, '_config', None)
    return items_file, config_file


@pytest.fixture
def write_items(isolated_files):
    """Write raw item records into the isolated item store."""
    items_file, _ = isolated_files

    def _write(records):
        items_file.write_text(json.dumps(records), encoding='utf-8')
        return items_file

    return _write


class RecordingMCP:
    """Stand-in for FastMCP that keeps registered tools and prompts by name."""

    def __init__(self):
        self.tools = {}
        self.prompts = {}

    def tool(self, *args, **kwargs):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn
        return decorator

    def prompt(self, *args, **kwargs):
        def decorator(fn):
            self.prompts[fn.__name__] = fn
            return fn
        return decorator


@pytest.fixture
def recording_mcp():
    return RecordingMCP()

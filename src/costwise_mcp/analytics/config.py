"""
Centralized configuration for cost analytics.

Provides the expiry horizon, reminder lead time, and trend/heatmap window
sizes, persisted to costwise_preferences.json.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Config file location (working directory unless overridden)
CONFIG_FILE = os.getenv("COSTWISE_CONFIG_FILE", "costwise_preferences.json")
CONFIG_SECTION = "analytics_config"


@dataclass
class AnalyticsConfig:
    """Configuration for statistics, reminders and chart windows."""

    # Expiry
    expiring_soon_days: int = 3       # Statistics "expiring" horizon
    reminder_days_before: int = 3     # Lead time for reminder drafts

    # Chart windows
    trend_months: int = 6
    heatmap_days: int = 30
    heatmap_months: int = 12

    # Home screen lists (recent, most expensive, expiring)
    dashboard_list_size: int = 3

    # Display
    currency_symbol: str = "¥"
    uncategorized_label: str = "Uncategorized"


# Fields that must stay strictly positive
_POSITIVE_FIELDS = {
    'expiring_soon_days', 'reminder_days_before', 'trend_months',
    'heatmap_days', 'heatmap_months', 'dashboard_list_size',
}

# Global config instance (lazy loaded)
_config: Optional[AnalyticsConfig] = None


def _coerce(name: str, value: Any) -> Any:
    """Convert a raw value to the type of the named config field."""
    if name in _POSITIVE_FIELDS:
        value = int(value)
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
        return value
    return str(value)


def load_config() -> AnalyticsConfig:
    """
    Load configuration from file or return defaults.

    Returns:
        AnalyticsConfig instance
    """
    global _config

    if _config is not None:
        return _config

    _config = AnalyticsConfig()

    if os.path.exists(CONFIG_FILE):
        try:
            with open(CONFIG_FILE, 'r', encoding='utf-8') as f:
                data = json.load(f)

            saved = data.get(CONFIG_SECTION, {})
            for f_ in fields(AnalyticsConfig):
                if f_.name in saved:
                    setattr(_config, f_.name, _coerce(f_.name, saved[f_.name]))

        except (json.JSONDecodeError, IOError, AttributeError, ValueError) as e:
            logger.warning("Could not read %s, using defaults: %s", CONFIG_FILE, e)
            _config = AnalyticsConfig()

    return _config


def save_config(config: AnalyticsConfig) -> Dict[str, Any]:
    """
    Save configuration to file.

    Args:
        config: AnalyticsConfig to save

    Returns:
        Dict with success status
    """
    global _config

    # Load existing preferences to preserve other settings
    existing = {}
    if os.path.exists(CONFIG_FILE):
        try:
            with open(CONFIG_FILE, 'r', encoding='utf-8') as f:
                existing = json.load(f)
        except (json.JSONDecodeError, IOError):
            existing = {}

    existing[CONFIG_SECTION] = asdict(config)

    try:
        with open(CONFIG_FILE, 'w', encoding='utf-8') as f:
            json.dump(existing, f, indent=2, ensure_ascii=False)

        _config = config
        return {'success': True, 'config': asdict(config)}
    except IOError as e:
        logger.warning("Could not save %s: %s", CONFIG_FILE, e)
        return {'success': False, 'error': str(e)}


def update_config(**kwargs) -> Dict[str, Any]:
    """
    Update specific configuration values.

    Unknown keys and None values are ignored.

    Args:
        **kwargs: Configuration fields to update

    Returns:
        Dict with success status and updated config

    Raises:
        ValueError: If a window or horizon is not a positive integer
    """
    config = load_config()
    valid_fields = {f_.name for f_ in fields(AnalyticsConfig)}

    # Validate everything before touching the live config
    changes = {
        key: _coerce(key, value)
        for key, value in kwargs.items()
        if key in valid_fields and value is not None
    }

    if changes:
        for key, value in changes.items():
            setattr(config, key, value)
        result = save_config(config)
        result['updated_fields'] = sorted(changes)
        return result

    return {'success': True, 'message': 'No changes made', 'config': asdict(config)}


def reset_config() -> Dict[str, Any]:
    """
    Reset configuration to defaults.

    Returns:
        Dict with success status
    """
    global _config
    _config = AnalyticsConfig()
    return save_config(_config)


def get_config_summary() -> Dict[str, Any]:
    """
    Get current configuration as a summary.

    Returns:
        Dict with all config values
    """
    config = load_config()
    return {
        'expiry': {
            'expiring_soon_days': config.expiring_soon_days,
            'reminder_days_before': config.reminder_days_before,
            'description': 'Days before the end of use at which an item counts as expiring'
        },
        'charts': {
            'trend_months': config.trend_months,
            'heatmap_days': config.heatmap_days,
            'heatmap_months': config.heatmap_months,
            'description': 'Number of trailing buckets in trend and heatmap series'
        },
        'dashboard': {
            'list_size': config.dashboard_list_size,
            'description': 'Items shown in each home screen list'
        },
        'display': {
            'currency_symbol': config.currency_symbol,
            'uncategorized_label': config.uncategorized_label,
            'description': 'Currency prefix and label for items without a category'
        }
    }

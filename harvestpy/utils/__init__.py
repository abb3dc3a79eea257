"""Utility modules for harvestpy."""

from .date_utils import parse_date, lookback_range, day_str
from .format_utils import format_hm, format_hours, hours_to_seconds, percent
from .file_utils import write_csv

__all__ = [
    'parse_date', 'lookback_range', 'day_str',
    'format_hm', 'format_hours', 'hours_to_seconds', 'percent',
    'write_csv'
]

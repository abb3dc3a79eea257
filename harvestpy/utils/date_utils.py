"""Date utility functions for harvestpy."""
from datetime import datetime, date, timedelta
from typing import Optional, Tuple

def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD string.
    
    Args:
        value: Date string
        
    Returns:
        Parsed date
        
    Raises:
        ValueError: If the string is not a YYYY-MM-DD date
    """
    return datetime.strptime(value, "%Y-%m-%d").date()

def lookback_range(days: int, today: Optional[date] = None) -> Tuple[date, date]:
    """Get the range from `days` days ago up to today.
    
    Args:
        days: Number of days to look back
        today: Reference date (defaults to the current date)
        
    Returns:
        Tuple of (start_date, end_date)
    """
    end = today or date.today()
    return end - timedelta(days=days), end

def day_str(dt: date) -> str:
    """Format a date as a string with day of week.
    
    Args:
        dt: Date to format
        
    Returns:
        Formatted date string
    """
    return f"({['Mo','Tue','Wed','Thu','Fri','Sat','Sun'][dt.weekday()]}){dt}"

"""Formatting utility functions for harvestpy."""

def format_hm(seconds: int) -> str:
    """Format seconds as HH:MM.
    
    Args:
        seconds: Number of seconds (can be negative)
        
    Returns:
        Formatted time string (with leading '-' if negative)
    """
    if seconds < 0:
        abs_seconds = abs(seconds)
        return f"-{abs_seconds // 3600:02}:{(abs_seconds % 3600) // 60:02}"
    return f"{seconds // 3600:02}:{(seconds % 3600) // 60:02}"

def hours_to_seconds(hours: float) -> int:
    """Convert Harvest decimal hours (e.g. 1.25) to whole seconds."""
    return int(round(hours * 3600))

def format_hours(hours: float) -> str:
    """Format Harvest decimal hours as HH:MM.
    
    Args:
        hours: Decimal hours
        
    Returns:
        Formatted time string
    """
    return format_hm(hours_to_seconds(hours))

def percent(val: float, total: float) -> str:
    """Calculate percentage and format as string.
    
    Args:
        val: Value
        total: Total
        
    Returns:
        Formatted percentage string
    """
    return f"{(val / total * 100):.0f}" if total else "0"

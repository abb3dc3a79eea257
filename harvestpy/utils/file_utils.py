"""File I/O utility functions for harvestpy."""
import csv

def write_csv(filename: str, headers: list, rows: list):
    """Write data to a CSV file.
    
    Args:
        filename: Output file name
        headers: Column headers
        rows: Data rows
    """
    with open(filename, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(headers)
        writer.writerows(rows)

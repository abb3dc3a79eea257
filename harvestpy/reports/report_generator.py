"""ReportGenerator class for rendering fetched time entries as tables."""
from typing import List, Optional
from collections import defaultdict
from tabulate import tabulate
from io import StringIO

from ..models.time_entry import TimeEntry
from ..utils.format_utils import format_hours, hours_to_seconds, format_hm, percent
from ..utils.file_utils import write_csv

ENTRY_HEADERS = ["#", "Date", "Project", "Task", "User", "Notes", "Hours", "%/Range"]
PROJECT_HEADERS = ["Project", "%/Range", "Entries", "Duration"]

class ReportGenerator:
    """Class for generating reports from time entries."""
    
    def __init__(self, entries: List[TimeEntry], date_range_str: str):
        """Initialize a ReportGenerator.
        
        Args:
            entries: Time entries in the order they should be listed
            date_range_str: String representing the date range
        """
        self.entries = entries
        self.date_range_str = date_range_str
        
        self.project_durations = defaultdict(int)
        self.project_counts = defaultdict(int)
        self.total_duration = 0
        for entry in entries:
            secs = hours_to_seconds(entry.hours)
            self.total_duration += secs
            self.project_durations[entry.project.name or "No project"] += secs
            self.project_counts[entry.project.name or "No project"] += 1
    
    def generate_report(self, csv_prefix: Optional[str] = None) -> str:
        """Generate a complete report.
        
        Args:
            csv_prefix: Prefix for CSV files (optional)
            
        Returns:
            Report as a string
        """
        output = StringIO()
        self._generate_entries_table(output, csv_prefix)
        self._generate_project_table(output, csv_prefix)
        print(f"\nTotal: {format_hm(self.total_duration)} in {len(self.entries)} entries", file=output)
        return output.getvalue()
    
    def _generate_entries_table(self, output: StringIO, csv_prefix: Optional[str] = None):
        """Generate the time entries table.
        
        Args:
            output: StringIO to write to
            csv_prefix: Prefix for CSV files (optional)
        """
        rows = []
        for idx, entry in enumerate(self.entries, start=1):
            rows.append([
                idx,
                entry.spent_date,
                entry.project.name,
                entry.task.name,
                entry.user.name,
                entry.notes,
                format_hours(entry.hours),
                percent(hours_to_seconds(entry.hours), self.total_duration),
            ])
        
        print(f"\n### Time Entries {self.date_range_str}:", file=output)
        print(tabulate(rows, headers=ENTRY_HEADERS, tablefmt="github"), file=output)
        
        if csv_prefix:
            write_csv(f"{csv_prefix}_entries.csv", ENTRY_HEADERS, rows)
    
    def _generate_project_table(self, output: StringIO, csv_prefix: Optional[str] = None):
        """Generate the project table.
        
        Args:
            output: StringIO to write to
            csv_prefix: Prefix for CSV files (optional)
        """
        proj_table = []
        for proj, secs in sorted(self.project_durations.items(), key=lambda x: x[1], reverse=True):
            proj_table.append([
                proj,
                percent(secs, self.total_duration),
                self.project_counts[proj],
                format_hm(secs)
            ])
        
        print(f"\n### Time by Project {self.date_range_str}:", file=output)
        print(tabulate(proj_table, headers=PROJECT_HEADERS, tablefmt="github"), file=output)
        
        if csv_prefix:
            write_csv(f"{csv_prefix}_projects.csv", PROJECT_HEADERS, proj_table)

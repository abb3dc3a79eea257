"""Report generation modules for harvestpy."""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']

"""PDF rendering services."""

from .checklist.renderer import render_checklist_pdf
from .checklist.models import ReportOptions

__all__ = ["render_checklist_pdf", "ReportOptions"]

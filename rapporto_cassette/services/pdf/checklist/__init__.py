"""PDF rendering for first-aid kit checklists."""

from .layout import ColumnLayoutPlanner, LayoutError, build_plan
from .models import Placement, PlacementState, ReportOptions
from .renderer import render_checklist_pdf
from .style import ChecklistStyle

__all__ = [
    "ChecklistStyle",
    "ColumnLayoutPlanner",
    "LayoutError",
    "Placement",
    "PlacementState",
    "ReportOptions",
    "build_plan",
    "render_checklist_pdf",
]

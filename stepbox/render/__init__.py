"""Renderers for step sections and the run summary."""

from stepbox.render.status import StatusStyle, style_for
from stepbox.render.step import StepSectionRenderer
from stepbox.render.summary import SummaryRenderer

__all__ = ["StatusStyle", "StepSectionRenderer", "SummaryRenderer", "style_for"]

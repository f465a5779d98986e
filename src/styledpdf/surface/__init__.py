"""Drawing surface protocols and the ReportLab implementation."""

from .base import DrawingSurface, Measurer
from .fonts import FontRegistry, register_ttf
from .reportlab_surface import ReportLabSurface

__all__ = ["DrawingSurface", "Measurer", "FontRegistry", "register_ttf", "ReportLabSurface"]

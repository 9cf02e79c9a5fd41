"""CivicEcho - stakeholder comment sentiment and summary dashboard."""

__version__ = "0.1.0"
__author__ = "CivicEcho Team"

from .core.models import *
from .core.config import settings
from .core.exceptions import InvalidCSVError
from .services.pipeline import DashboardController

__all__ = [
    "settings",
    "InvalidCSVError",
    "DashboardController",
]

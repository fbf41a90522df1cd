"""Data models for the skating result entry application."""

from src.models.skater import Skater
from src.models.event import Event
from src.models.result import PointValue, Result
from src.models.form import ResultForm

__all__ = ["Skater", "Event", "PointValue", "Result", "ResultForm"]

"""Prompt templates used by the use cases."""

from .daily_plan import DailyPlanPrompts

__all__ = ["DailyPlanPrompts"]

"""Schedule suggestion strategies."""

from .base import SuggestionStrategy
from .rules import RuleBasedStrategy, suggest_schedule

__all__ = ["RuleBasedStrategy", "SuggestionStrategy", "suggest_schedule"]

"""
Model-Year Filter Tool

Derives debug and production model-year filters for vehicle diagnostic
commands from per-year support evidence.
"""

__version__ = "0.1.0"

from .cli import main
from .debug_filter import synthesize_debug_filter
from .filter_optimizer import optimize_filter
from .models import Generation, GenerationSet, SupportSnapshot, YearFilter
from .predicate import allows

__all__ = [
    "main",
    "allows",
    "synthesize_debug_filter",
    "optimize_filter",
    "YearFilter",
    "Generation",
    "GenerationSet",
    "SupportSnapshot",
]

"""
Components package for PanelNet

Contains the source contract, the panel leaf, and series/parallel networks.
"""

from .source import Source, power
from .panel import Panel
from .networks import (
    CompositeSource, ParallelSource, SeriesSource, series, parallel, string_of, contains_empty_network
)

__all__ = [
    "Source",
    "power",
    "Panel",
    "CompositeSource",
    "ParallelSource",
    "SeriesSource",
    "series",
    "parallel",
    "string_of",
    "contains_empty_network"
]

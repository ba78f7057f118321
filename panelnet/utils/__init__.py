"""
Utilities package for PanelNet

Contains configuration management, constants, and helper functions.
"""

from .config import PanelNetConfig
from .constants import *
from .helpers import *

__all__ = ["PanelNetConfig"]

"""
slider-core - position/value engine for multi-handle linear sliders.

Pure computational core: maps handle positions (percent of track) to domain
values and back, and enforces ordering/crossing/range constraints on drag.
"""

from slider_core.control import Control

__all__ = ["Control"]

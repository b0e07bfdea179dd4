"""Engines package"""

from .base_engine import BaseEngine
from .brute_engine import BruteEngine
from .probe_engine import ProbeEngine, ProbeObserver
from .wayback_engine import WaybackEngine

__all__ = ["BaseEngine", "BruteEngine", "ProbeEngine", "ProbeObserver", "WaybackEngine"]

"""Core package for scanner"""

from .candidates import CandidateBuilder
from .config import Config
from .result_manager import ResultManager
from .scanner import ScanCoordinator
from .wordlist import WordlistManager

__all__ = ["CandidateBuilder", "Config", "ResultManager", "ScanCoordinator", "WordlistManager"]

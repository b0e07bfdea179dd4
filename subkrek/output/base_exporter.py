"""导出器基类"""
from abc import ABC, abstractmethod


class BaseExporter(ABC):
    @abstractmethod
    def export(self, summary, path):
        """把 ScanSummary 写入 path"""

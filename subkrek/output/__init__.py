"""输出导出器包"""
from .base_exporter import BaseExporter
from .json_exporter import JsonExporter
from .text_exporter import TextExporter

__all__ = ["BaseExporter", "JsonExporter", "TextExporter", "exporter_for"]


def exporter_for(path) -> BaseExporter:
    """根据文件扩展名选择导出器，.json 之外一律按文本导出"""
    if str(path).lower().endswith('.json'):
        return JsonExporter()
    return TextExporter()

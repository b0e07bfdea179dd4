"""JSON 导出器：完整的扫描汇总"""
import json

from .base_exporter import BaseExporter


class JsonExporter(BaseExporter):
    def export(self, summary, path):
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(summary.to_dict(), f, ensure_ascii=False, indent=2)

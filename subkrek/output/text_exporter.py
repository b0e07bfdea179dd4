"""文本导出器：每行一个存活子域名"""
from .base_exporter import BaseExporter


class TextExporter(BaseExporter):
    def export(self, summary, path):
        with open(path, 'w', encoding='utf-8') as f:
            f.write('\n'.join(summary.live))

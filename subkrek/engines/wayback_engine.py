# -*- coding: utf-8 -*-
"""
Wayback Machine 引擎

查询 CDX 索引中 *.<domain> 的历史URL，并从中提取子域名。
历史数据很杂（重定向、查询参数、大小写混用），单条无法匹配的URL只计数跳过。
"""

import re
from typing import Iterable, List, Optional

import requests

from ..errors import EmptyResponse, HttpError, InvalidResponse, NetworkError
from ..models import ArchiveRecord, ExtractionResult
from ..utils.http_client import HttpClient
from ..utils.logger import get_logger
from .base_engine import BaseEngine

logger = get_logger(__name__)

CDX_ENDPOINT = 'http://web.archive.org/cdx/search/cdx'
PROGRESS_EVERY = 1000


class WaybackEngine(BaseEngine):
    """Wayback Machine 子域名收集器"""

    name = 'wayback'

    def __init__(self, client: Optional[HttpClient] = None, endpoint: str = CDX_ENDPOINT,
                 timeout: int = 30):
        self.client = client or HttpClient(timeout=timeout)
        self.endpoint = endpoint

    def fetch(self, domain: str) -> List[str]:
        """请求 CDX 索引，返回表头之后每一行的第一列"""
        params = {
            'url': f'*.{domain}',
            'output': 'json',
            'fl': 'original',
            'collapse': 'urlkey',
        }
        logger.info("正在查询 Wayback Machine: *.%s", domain)

        try:
            response = self.client.get(self.endpoint, params=params)
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e

        if not response.ok:
            raise HttpError(response.status_code, response.reason)

        try:
            rows = response.json()
        except ValueError as e:
            raise InvalidResponse(str(e)) from e

        if not isinstance(rows, list):
            raise InvalidResponse(f"期望 JSON 数组，实际为 {type(rows).__name__}")
        for row in rows:
            if not isinstance(row, list) or not row:
                raise InvalidResponse(f"无效的行: {row!r}")
        if len(rows) <= 1:
            raise EmptyResponse()

        logger.info("从 Wayback Machine 获取了 %d 条URL", len(rows) - 1)
        return [row[0] for row in rows[1:]]

    @staticmethod
    def subdomain_pattern(domain: str):
        """可选协议 + 一个或多个标签 + 目标域名，域名之后只能是结尾、端口或路径"""
        return re.compile(
            r'^(?:[a-z][a-z0-9+.-]*://)?'
            r'((?:[a-z0-9_](?:[a-z0-9_-]*[a-z0-9_])?\.)+)'
            + re.escape(domain) +
            r'(?=[:/?#]|$)',
            re.IGNORECASE,
        )

    def parse_record(self, pattern, domain: str, url) -> ArchiveRecord:
        if not isinstance(url, str):
            return ArchiveRecord(url=repr(url))
        match = pattern.match(url.strip())
        if match is None:
            return ArchiveRecord(url=url)

        full_domain = match.group(1).lower()
        if not full_domain.endswith(domain):
            full_domain += domain
        return ArchiveRecord(url=url, subdomain=full_domain.rstrip('.'))

    def extract_subdomains(self, domain: str, urls: Iterable) -> ExtractionResult:
        """从URL列表中提取去重后的子域名"""
        domain = domain.lower()
        pattern = self.subdomain_pattern(domain)
        subdomains = set()
        result = ExtractionResult()

        for url in urls:
            result.processed += 1
            if result.processed % PROGRESS_EVERY == 0:
                logger.info("已处理 %d 条URL", result.processed)

            record = self.parse_record(pattern, domain, url)
            if record.subdomain is None:
                result.skipped += 1
                continue
            subdomains.add(record.subdomain)

        if result.skipped:
            logger.warning("跳过了 %d 条无效URL", result.skipped)
        result.subdomains = sorted(subdomains)
        logger.info("提取到 %d 个唯一子域名", len(result.subdomains))
        return result

    def search(self, target: str):
        urls = self.fetch(target)
        return self.extract_subdomains(target, urls).subdomains

    def close(self):
        self.client.close()

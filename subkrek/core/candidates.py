# -*- coding: utf-8 -*-
"""
候选域名构造

把字典前缀和 Wayback 收集到的完整域名统一成一个只属于目标域名的候选集合。
"""

from typing import Iterable, List

from ..utils.helpers import MAX_NAME_LENGTH, is_valid_hostname
from ..utils.logger import get_logger

logger = get_logger(__name__)


class CandidateBuilder:
    """候选域名构造器"""

    def __init__(self, max_length: int = MAX_NAME_LENGTH):
        self.max_length = max_length
        self.dropped = 0

    @staticmethod
    def compose(domain: str, fragments: Iterable[str]) -> List[str]:
        """前缀 + 目标域名"""
        return [f"{fragment}.{domain}" for fragment in fragments]

    def build(self, domain: str, names: Iterable[str]) -> List[str]:
        """统一、过滤并去重，返回排序后的候选列表。

        只保留目标域名之下的名字（不包含目标域名本身），
        超长或含非法标签的名字会被丢弃并计数。
        """
        suffix = f".{domain}"
        candidates = set()
        self.dropped = 0

        for name in names:
            name = name.strip().lower().rstrip('.')
            if not name.endswith(suffix):
                self.dropped += 1
                continue
            if len(name) > self.max_length or not is_valid_hostname(name):
                logger.debug("丢弃无效候选: %s", name)
                self.dropped += 1
                continue
            candidates.add(name)

        if self.dropped:
            logger.warning("丢弃了 %d 个不属于 %s 或格式无效的候选", self.dropped, domain)
        return sorted(candidates)

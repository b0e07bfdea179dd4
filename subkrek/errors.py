# -*- coding: utf-8 -*-
"""
异常定义模块

所有异常都继承自 SubkrekError，按来源分为四类：
- InputError   输入错误（域名、并发数、空候选集），直接终止本次扫描
- SourceError  字典来源错误，仅当字典是唯一来源时才终止
- HarvestError Wayback 收集错误，只记录警告
- ProbeError   单个候选的探测错误，记为 ERRORED，不影响整体
"""

from pathlib import Path
from typing import Optional


class SubkrekError(Exception):
    """基础异常"""


# ---------------------------------------------------------------- 输入错误

class InputError(SubkrekError):
    """输入错误"""


class InvalidDomain(InputError):
    def __init__(self, domain: str, reason: str = "格式无效"):
        self.domain = domain
        self.reason = reason
        super().__init__(f"无效的域名 {domain!r}: {reason}")


class InvalidConcurrency(InputError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"并发数必须是正整数，当前值: {value!r}")


class EmptyCandidateSet(InputError):
    def __init__(self, domain: str = ""):
        self.domain = domain
        super().__init__(f"没有可扫描的子域名: {domain}" if domain else "没有可扫描的子域名")


# ---------------------------------------------------------------- 字典错误

class SourceError(SubkrekError):
    """字典来源错误"""

    def __init__(self, path, message: str):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class WordlistNotFound(SourceError):
    def __init__(self, path):
        super().__init__(path, f"字典文件不存在: {path}")


class WordlistNotADirectory(SourceError):
    def __init__(self, path):
        super().__init__(path, f"不是目录: {path}")


class EmptyWordlist(SourceError):
    def __init__(self, path=None):
        super().__init__(path, f"字典为空: {path}" if path else "字典为空")


# ---------------------------------------------------------------- Wayback 错误

class HarvestError(SubkrekError):
    """Wayback Machine 收集错误"""


class NetworkError(HarvestError):
    def __init__(self, message: str):
        super().__init__(f"网络错误: {message}")


class HttpError(HarvestError):
    def __init__(self, status: int, reason: Optional[str] = None):
        self.status = status
        self.reason = reason or "Unknown error"
        super().__init__(f"HTTP {status} {self.reason}")


class InvalidResponse(HarvestError):
    def __init__(self, message: str):
        super().__init__(f"响应格式无效: {message}")


class EmptyResponse(HarvestError):
    def __init__(self):
        super().__init__("Wayback Machine 没有返回数据")


# ---------------------------------------------------------------- 探测错误

class ProbeError(SubkrekError):
    """单个候选的探测错误"""


class NameResolutionError(ProbeError):
    def __init__(self, host: str, cause=None):
        self.host = host
        self.cause = cause
        message = f"无法解析: {host}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)


class MalformedCandidate(ProbeError):
    def __init__(self, candidate):
        self.candidate = candidate
        super().__init__(f"候选域名格式错误: {candidate!r}")

"""辅助函数：标签校验、域名规范化等小工具"""
import re

from ..errors import InvalidDomain

MAX_LABEL_LENGTH = 63
MAX_NAME_LENGTH = 253

# 首尾必须是字母或数字，中间允许 - _ .
_LABEL_RE = re.compile(r'[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?')
_SCHEME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*://')


def is_valid_label(word: str) -> bool:
    """字典行是否可以作为子域名前缀使用"""
    if not word or len(word) > MAX_LABEL_LENGTH:
        return False
    if not _LABEL_RE.fullmatch(word):
        return False
    return '..' not in word and '--' not in word


def is_valid_hostname(name: str) -> bool:
    """完整域名校验：总长不超过253，每一段都满足标签规则"""
    if not name or len(name) > MAX_NAME_LENGTH:
        return False
    return all(is_valid_label(part) for part in name.split('.'))


def format_url(url: str) -> str:
    url = url.strip().lower()
    if not _SCHEME_RE.match(url):
        return f'https://{url}'
    return url


def normalize_domain(value: str) -> str:
    """去掉协议、路径、端口和结尾的点，转为小写。

    >>> normalize_domain('HTTPS://Example.com/path')
    'example.com'
    """
    if value is None or not value.strip():
        raise InvalidDomain(value or '', '域名为空')

    host = format_url(value).split('://', 1)[1]
    host = re.split(r'[/?#]', host, maxsplit=1)[0]
    host = host.rsplit('@', 1)[-1].split(':', 1)[0].rstrip('.')

    if not host:
        raise InvalidDomain(value, '域名为空')
    if '.' not in host:
        raise InvalidDomain(value, '至少需要包含一个点')
    if not is_valid_hostname(host):
        raise InvalidDomain(value, '包含非法字符')
    return host

"""工具集合"""

from .connector import TcpConnector
from .dns_resolver import AsyncResolver
from .helpers import is_valid_hostname, is_valid_label, normalize_domain
from .http_client import HttpClient
from .logger import get_logger, set_level

__all__ = [
    "AsyncResolver",
    "HttpClient",
    "TcpConnector",
    "get_logger",
    "is_valid_hostname",
    "is_valid_label",
    "normalize_domain",
    "set_level",
]

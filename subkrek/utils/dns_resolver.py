"""异步 DNS 解析（aiodns）"""
import asyncio
import socket
from typing import List

import aiodns

from ..errors import NameResolutionError

FAMILIES = (socket.AF_INET, socket.AF_INET6)


class AsyncResolver:
    """把域名解析为全部 IPv4 和 IPv6 地址（IPv4 在前）。

    aiodns.DNSResolver 需要运行中的事件循环，因此在第一次解析时才创建。
    只有两种地址族都解析失败时才抛出 NameResolutionError。
    """

    def __init__(self, nameservers=None):
        self.nameservers = nameservers or None
        self._resolver = None

    async def resolve(self, host: str) -> List[str]:
        if self._resolver is None:
            self._resolver = aiodns.DNSResolver(nameservers=self.nameservers)

        answers = await asyncio.gather(
            *(self._resolver.gethostbyname(host, family) for family in FAMILIES),
            return_exceptions=True,
        )

        addresses = []
        last_error = None
        for answer in answers:
            if isinstance(answer, aiodns.error.DNSError):
                last_error = answer
                continue
            if isinstance(answer, BaseException):
                raise answer
            for address in answer.addresses:
                if address not in addresses:
                    addresses.append(address)

        if not addresses:
            raise NameResolutionError(host, last_error)
        return addresses

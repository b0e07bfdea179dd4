"""TCP 连接器：探测引擎通过它建立连接，测试中可以替换为假的实现"""
import asyncio


class TcpConnector:
    """先用 resolver 解析出全部地址，再依次尝试连接。

    resolver 为 None 时直接把主机名交给 asyncio.open_connection（系统解析）。
    任一地址连接成功即返回；否则只要有地址拒绝连接就抛出 ConnectionRefusedError
    （主机存在），全部失败时抛出最后一个错误，由调用方分类。
    """

    def __init__(self, resolver=None):
        self.resolver = resolver

    async def connect(self, host: str, port: int):
        addresses = [host]
        if self.resolver is not None:
            addresses = await self.resolver.resolve(host)

        refused = None
        last_error = None
        for address in addresses:
            try:
                reader, writer = await asyncio.open_connection(address, port)
            except ConnectionRefusedError as e:
                refused = e
                continue
            except OSError as e:
                last_error = e
                continue

            writer.close()
            try:
                await writer.wait_closed()
            except ConnectionError:
                # 对端已经重置连接，握手本身已经成功
                pass
            return

        if refused is not None:
            raise refused
        raise last_error

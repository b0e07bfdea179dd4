"""引擎基类：定义候选来源的接口"""
from abc import ABC, abstractmethod


class BaseEngine(ABC):
    name = 'base'

    @abstractmethod
    def search(self, target: str):
        """返回发现的候选域名列表（同步或 async 实现均可）"""

"""字典爆破引擎：字典前缀 + 目标域名"""
from pathlib import Path

from ..core.candidates import CandidateBuilder
from ..core.wordlist import DEFAULT_EXTENSION, DEFAULT_PREFIXES, WordlistManager
from ..errors import EmptyWordlist, SourceError
from ..utils.logger import get_logger
from .base_engine import BaseEngine

logger = get_logger(__name__)


class BruteEngine(BaseEngine):
    """wordlists 可以是文件或目录；相对路径按 base_directory 解析。

    单个字典出错只记录警告；全部字典都无法注册时抛出 SourceError。
    没有指定任何字典时使用内置的默认前缀。
    """

    name = 'wordlist'

    def __init__(self, wordlists=None, base_directory=None, extension=DEFAULT_EXTENSION):
        self.wordlists = list(wordlists or [])
        self.manager = WordlistManager(base_directory or Path.cwd(), extension=extension)

    def load(self):
        """注册并加载所有字典，返回前缀集合"""
        if not self.wordlists:
            logger.info("未指定字典，使用 %d 个默认前缀", len(DEFAULT_PREFIXES))
            return frozenset(DEFAULT_PREFIXES)

        errors = []
        for path in self.wordlists:
            try:
                self.manager.register(path)
            except SourceError as e:
                logger.warning("%s", e)
                errors.append(e)

        if not self.manager.paths:
            if len(errors) == 1:
                raise errors[0]
            raise EmptyWordlist(self.manager.base_directory)

        self.manager.load_all()
        return self.manager.fragments()

    def search(self, target: str):
        return CandidateBuilder.compose(target, sorted(self.load()))

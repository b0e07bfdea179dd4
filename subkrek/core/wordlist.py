# -*- coding: utf-8 -*-
"""
字典管理模块

负责注册字典文件/目录、逐行读取、校验并去重，得到子域名前缀集合。
单行格式错误只会被跳过，不会中断整个加载过程；
但如果全部加载完后集合为空，会抛出 EmptyWordlist，由调度器决定回退或终止。
"""

from pathlib import Path
from typing import FrozenSet, Iterable, List, Union

from ..errors import EmptyWordlist, WordlistNotADirectory, WordlistNotFound
from ..utils.helpers import is_valid_label
from ..utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

DEFAULT_EXTENSION = '.txt'

DEFAULT_PREFIXES = [
    "www", "mail", "remote", "blog", "webmail", "server", "ns1", "ns2",
    "smtp", "secure", "vpn", "m", "shop", "ftp", "mail2", "test", "portal",
    "web", "dev", "staging", "api", "corp", "admin", "mobile", "mx", "wiki",
]


class WordlistManager:
    """字典注册表。

    持有三样东西：解析相对路径用的基准目录、已注册文件的有序列表、
    已加载的前缀集合。前缀集合只通过 fragments() 以只读视图交给调用方。
    """

    def __init__(self, base_directory: PathLike, extension: str = DEFAULT_EXTENSION):
        self.base_directory = Path(base_directory)
        self.extension = extension
        self._paths: List[Path] = []
        self._words = set()
        self.rejected = 0

    @property
    def paths(self) -> List[Path]:
        return list(self._paths)

    def _resolve(self, path: PathLike) -> Path:
        path = Path(path).expanduser()
        if not path.is_absolute():
            path = self.base_directory / path
        return path.resolve()

    def register_file(self, path: PathLike) -> Path:
        """注册单个字典文件，重复注册同一文件不产生影响"""
        resolved = self._resolve(path)
        if not resolved.is_file():
            raise WordlistNotFound(resolved)
        if resolved not in self._paths:
            self._paths.append(resolved)
            logger.debug("注册字典: %s", resolved)
        return resolved

    def register_directory(self, path: PathLike) -> List[Path]:
        """注册目录下所有扩展名匹配的字典文件（不递归）"""
        resolved = self._resolve(path)
        if not resolved.exists():
            raise WordlistNotFound(resolved)
        if not resolved.is_dir():
            raise WordlistNotADirectory(resolved)

        registered = []
        for entry in sorted(resolved.iterdir()):
            if entry.is_file() and entry.name.endswith(self.extension):
                registered.append(self.register_file(entry))
        if not registered:
            logger.warning("目录 %s 中没有 %s 字典文件", resolved, self.extension)
        return registered

    def register(self, path: PathLike) -> List[Path]:
        """按路径类型自动选择注册文件或目录"""
        resolved = self._resolve(path)
        if resolved.is_dir():
            return self.register_directory(resolved)
        return [self.register_file(resolved)]

    def load_all(self) -> int:
        """重新加载所有已注册的字典，返回加载到的前缀数量"""
        self._words.clear()
        self.rejected = 0
        for path in self._paths:
            self._load_file(path)

        if not self._words:
            raise EmptyWordlist(self._paths[0] if len(self._paths) == 1 else self.base_directory)

        logger.info("从 %d 个字典加载了 %d 个前缀", len(self._paths), len(self._words))
        return len(self._words)

    def _load_file(self, path: Path):
        rejected = 0
        try:
            with open(path, 'r', encoding='utf-8') as f:
                for line in f:
                    word = line.strip()
                    if not word or word.startswith('#'):
                        continue
                    if not is_valid_label(word):
                        logger.debug("跳过无效行 %r (%s)", word, path.name)
                        rejected += 1
                        continue
                    self._words.add(word.lower())
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("无法读取字典 %s: %s", path, e)
            return

        if rejected:
            logger.warning("字典 %s 中有 %d 行格式无效，已跳过", path.name, rejected)
        self.rejected += rejected

    def fragments(self) -> FrozenSet[str]:
        return frozenset(self._words)

    @staticmethod
    def merge(*lists: Iterable[str]) -> List[str]:
        """合并多个字典，排序去重"""
        combined = set()
        for words in lists:
            combined.update(words)
        return sorted(combined)

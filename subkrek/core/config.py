"""配置管理：从 YAML 加载配置并与内置默认值合并"""
import copy
from pathlib import Path

import yaml

PACKAGE_DIR = Path(__file__).parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_DIR / 'config' / 'default_config.yaml'
DEFAULT_WORDLIST_DIR = PACKAGE_DIR / 'wordlists'

DEFAULTS = {
    'concurrency': 50,
    'timeout': 5,
    'port': 80,
    'wordlist_dir': None,
    'wordlists': ['default.txt'],
    'wordlist_extension': '.txt',
    'wayback': {
        'endpoint': 'http://web.archive.org/cdx/search/cdx',
        'timeout': 30,
    },
    'nameservers': None,
    'log_level': 'INFO',
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    def __init__(self, path: str = None):
        self.path = Path(path) if path else DEFAULT_CONFIG_PATH
        self._data = copy.deepcopy(DEFAULTS)
        self.load()

    def load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f'配置文件格式错误（顶层必须是映射）: {self.path}')
        self._data = _merge(DEFAULTS, loaded)

    def get(self, key, default=None):
        """支持 'wayback.endpoint' 这样的点号路径"""
        node = self._data
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def update(self, **overrides):
        """覆盖配置项，值为 None 的项忽略（便于直接传入命令行参数）"""
        self._data = _merge(self._data, {k: v for k, v in overrides.items() if v is not None})

    def as_dict(self):
        return copy.deepcopy(self._data)

    @property
    def wordlist_dir(self) -> Path:
        value = self.get('wordlist_dir')
        return Path(value) if value else DEFAULT_WORDLIST_DIR

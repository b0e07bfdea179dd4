"""日志封装：所有模块共用 subkrek 包级 logger 的输出"""
import logging

PACKAGE_LOGGER = 'subkrek'
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def get_logger(name=PACKAGE_LOGGER, level=None):
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(h)
        root.setLevel(logging.INFO)
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_level(level):
    """调整整个包的日志级别，level 可以是 'DEBUG' 之类的字符串"""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    get_logger().setLevel(level)

"""日志配置模块

库只往自己的 "chaining-assertion" logger 里写日志，默认挂 NullHandler，
不碰 root logger，日志去向由使用方的测试配置决定。
"""

import logging
import os
import sys

from ..config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(level: str | None = None) -> logging.Logger:
    """给库的 logger 挂一个 stderr handler，用于调试断言本身

    - 级别取参数，其次环境变量 LOG_LEVEL（默认 INFO）
    - 格式：时间戳 | 级别 | 模块 | 消息
    - 重复调用只更新级别，不会重复添加 handler
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    for handler in logger.handlers:
        if getattr(handler, "_chaining_stderr", False):
            handler.setLevel(logger.level)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logger.level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler._chaining_stderr = True
    logger.addHandler(handler)

    return logger

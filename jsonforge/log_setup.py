# -*- coding: utf-8 -*-
"""日志配置 — 仅供桌面程序入口调用，库代码只使用 getLogger(__name__)"""

import logging
from typing import Optional

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None,
                  silent: bool = False) -> Optional[str]:
    """配置根 logger。

    Args:
        log_level: DEBUG / INFO / WARNING / ERROR
        log_file: 日志文件路径，为 None 时不写文件
        silent: 为 True 时不输出到控制台

    Returns:
        启用文件日志时返回文件路径，否则返回 None
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    if not silent:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root.addHandler(console)

    if log_file is None:
        return None

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    # 文件始终记录 DEBUG
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    root.addHandler(file_handler)
    root.setLevel(min(level, logging.DEBUG))
    logging.getLogger(__name__).info("Logging to file: %s", log_file)
    return log_file

# -*- coding: utf-8 -*-
"""模型文件写入"""

import logging
from pathlib import Path
from typing import Union

from .emitter import EXTENSIONS, normalize_language

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def ensure_directory_exists(dir_path: PathLike) -> Path:
    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def model_file_path(models_path: PathLike, name: str, language: str) -> Path:
    """模型文件路径：models_path/<name>.ts 或 .js"""
    ext = EXTENSIONS[normalize_language(language)]
    return Path(models_path).resolve() / f"{name}{ext}"


def write_model_file(file_path: PathLike, content: str) -> Path:
    """写入模型文件，目录不存在时自动创建，已存在的文件直接覆盖。"""
    path = Path(file_path)
    ensure_directory_exists(path.parent)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote model file %s (%d chars)", path, len(content))
    return path

# -*- coding: utf-8 -*-
"""JsonForge — JSON 解析 / 序列化，并可按数据结构生成类型模型文件"""

import logging
from pathlib import Path
from typing import Any, Optional

from .emitter import emit
from .exceptions import JsonForgeError
from .json_fmt import ParseResult, parse_json_text, stringify_json
from .model_writer import model_file_path, write_model_file
from .options import ForgeOptions

logger = logging.getLogger(__name__)


class JsonForge:
    """带配置的 JSON 解析器与模型生成器。

    Example:
        forge = JsonForge(generate_models=True, interface_name="User")
        result = forge.parse_to_object('{"name": "John", "age": 30}')
        # result.model_files == ['/abs/path/models/User.ts']
    """

    def __init__(self, options: Optional[ForgeOptions] = None, **overrides: Any):
        options = options or ForgeOptions()
        self._options = options.merged(**overrides) if overrides else options

    # ── 解析 / 序列化 ────────────────────────────────────────
    def parse_to_object(self, json_string: str) -> ParseResult:
        """JSON 文本 → 对象。启用 generate_models 时同时写出模型文件。"""
        result = parse_json_text(json_string)
        if not result.success:
            logger.debug("Rejected JSON input: %s", result.error.splitlines()[0])
            return result
        self._attach_model(result, result.data)
        return result

    def parse_to_string(self, obj: Any) -> ParseResult:
        """对象 → JSON 文本。启用 generate_models 时按 obj 生成模型文件。"""
        result = stringify_json(obj, prettify=self._options.prettify)
        if result.success:
            self._attach_model(result, obj)
        return result

    def _attach_model(self, result: ParseResult, data: Any) -> None:
        if not self._options.generate_models:
            return
        path = self.generate_model(data)
        if path is not None:
            result.model_files = [str(path)]

    # ── 模型生成 ─────────────────────────────────────────────
    def render_model(self, data: Any) -> str:
        """按当前配置生成类型声明文本，不写文件。"""
        opts = self._options
        return emit(data, opts.interface_name, opts.export_models,
                    language=opts.language, untyped=opts.untyped,
                    strict=opts.strict)

    def generate_model(self, data: Any) -> Optional[Path]:
        """生成并写出模型文件，返回文件路径；失败时记录日志并返回 None。"""
        opts = self._options
        try:
            content = self.render_model(data)
            path = model_file_path(opts.models_path, opts.interface_name,
                                   opts.language)
            return write_model_file(path, content)
        except (JsonForgeError, OSError) as e:
            logger.error("Error generating model %s: %s", opts.interface_name, e)
            return None

    # ── 配置 ─────────────────────────────────────────────────
    def configure(self, **changes: Any) -> None:
        """更新配置，未给出的选项保持不变。"""
        self._options = self._options.merged(**changes)

    def get_config(self) -> ForgeOptions:
        return self._options.model_copy()


def parse_json(json_string: str, options: Optional[ForgeOptions] = None,
               **overrides: Any) -> ParseResult:
    """快捷方法：JSON 文本 → 对象"""
    return JsonForge(options, **overrides).parse_to_object(json_string)


def stringify_json_value(obj: Any, options: Optional[ForgeOptions] = None,
                         **overrides: Any) -> ParseResult:
    """快捷方法：对象 → JSON 文本"""
    return JsonForge(options, **overrides).parse_to_string(obj)

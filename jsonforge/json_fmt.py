# -*- coding: utf-8 -*-
"""JSON 解析 / 序列化 / 格式化 — 纯函数，无 UI 依赖

解析失败时给出可读的错误描述：出错的记号、行列位置、
常见原因提示，以及出错位置附近的原文片段。
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import JsonDecodeFailure

SNIPPET_RADIUS = 20

HINT_UNEXPECTED_TOKEN = (
    "Check for: missing quotes around properties, trailing commas, "
    "or invalid characters")
HINT_UNEXPECTED_END = (
    "The JSON string appears to be incomplete "
    "(missing closing braces or brackets)")


@dataclass
class ParseResult:
    """解析 / 序列化结果。失败时 data 为 None，error 为错误描述。"""

    data: Any
    success: bool
    error: Optional[str] = None
    model_files: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        out = {"data": self.data, "success": self.success}
        if self.error is not None:
            out["error"] = self.error
        if self.model_files is not None:
            out["model_files"] = list(self.model_files)
        return out


class _NonStandardConstant(ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is not valid JSON")


def _reject_constant(name: str):
    raise _NonStandardConstant(name)


def _decode(text: str) -> Any:
    """json.loads 的严格版本：NaN / Infinity 不是合法 JSON。"""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except _NonStandardConstant as e:
        m = re.search(r'(?<![\w"])' + re.escape(e.name) + r'(?![\w"])', text)
        pos = m.start() if m else 0
        raise json.JSONDecodeError(str(e), text, pos) from None


def _snippet(text: str, pos: int) -> str:
    return text[max(0, pos - SNIPPET_RADIUS):pos + SNIPPET_RADIUS]


def describe_decode_error(text: str, exc: json.JSONDecodeError) -> str:
    """把 JSONDecodeError 转为多行错误描述。"""
    pos = exc.pos
    where = f"line {exc.lineno} column {exc.colno} (position {pos})"
    if not text[pos:].strip():
        head = f"Unexpected end of JSON input at {where}"
        hint = HINT_UNEXPECTED_END
    else:
        head = f"Unexpected token {text[pos]!r} in JSON at {where}"
        hint = HINT_UNEXPECTED_TOKEN
    lines = [
        f"JSON Parse Error: {head}: {exc.msg}",
        f"  → {hint}",
        f'  → Near: "{_snippet(text, pos)}"',
    ]
    return "\n".join(lines)


def loads(text: str) -> Any:
    """解析 JSON 文本，失败抛出 JsonDecodeFailure（消息为错误描述）。"""
    try:
        return _decode(text)
    except json.JSONDecodeError as e:
        raise JsonDecodeFailure(describe_decode_error(text, e)) from e


def _describe_value(obj: Any) -> str:
    if isinstance(obj, dict):
        return f"Valid JSON object with {len(obj)} key(s)"
    if isinstance(obj, list):
        return f"Valid JSON array with {len(obj)} element(s)"
    return f"Valid JSON value (type: {type(obj).__name__})"


def validate_json(text) -> Tuple[bool, str]:
    """验证 JSON 是否合法，返回 (ok, message)"""
    if not isinstance(text, str) or not text:
        return False, "Input must be a non-empty string"
    if not text.strip():
        return False, "JSON string is empty or contains only whitespace"
    try:
        obj = _decode(text)
    except json.JSONDecodeError as e:
        return False, describe_decode_error(text, e)
    return True, _describe_value(obj)


def parse_json_text(text) -> ParseResult:
    """解析 JSON 文本为 Python 对象。"""
    ok, message = validate_json(text)
    if not ok:
        return ParseResult(data=None, success=False, error=message)
    return ParseResult(data=_decode(text), success=True)


def dumps(obj: Any, prettify: bool = True) -> str:
    """序列化为 JSON。美化时缩进 2 个空格，否则不含任何空白。"""
    if prettify:
        return json.dumps(obj, indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False,
                      allow_nan=False)


def stringify_json(obj: Any, prettify: bool = True) -> ParseResult:
    """对象转 JSON 文本。不可序列化或循环引用时返回失败结果。"""
    try:
        return ParseResult(data=dumps(obj, prettify), success=True)
    except (TypeError, ValueError) as e:
        return ParseResult(data=None, success=False, error=str(e))


def format_json(text, indent=4, sort_keys=False, ensure_ascii=False):
    """格式化（美化）JSON"""
    obj = loads(text)
    return json.dumps(obj, indent=indent, sort_keys=sort_keys,
                      ensure_ascii=ensure_ascii)


def minify_json(text):
    """压缩 JSON（去除空白）"""
    obj = loads(text)
    return json.dumps(obj, separators=(',', ':'), ensure_ascii=False)

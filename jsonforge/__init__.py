# -*- coding: utf-8 -*-
"""JsonForge — JSON 解析与类型模型生成"""

from .declarations import TypeDeclaration, build_declaration
from .emitter import (
    emit,
    generate_javascript_types,
    generate_typescript_interface,
)
from .exceptions import (
    JsonDecodeFailure,
    JsonForgeError,
    RootNotObjectError,
    UnknownValueError,
    UnsupportedLanguageError,
)
from .forge import JsonForge, parse_json, stringify_json_value
from .inference import Classification, Kind, classify
from .json_fmt import ParseResult, validate_json
from .options import ForgeOptions

__version__ = "1.0.0"

__all__ = [
    "Classification",
    "ForgeOptions",
    "JsonDecodeFailure",
    "JsonForge",
    "JsonForgeError",
    "Kind",
    "ParseResult",
    "RootNotObjectError",
    "TypeDeclaration",
    "UnknownValueError",
    "UnsupportedLanguageError",
    "build_declaration",
    "classify",
    "emit",
    "generate_javascript_types",
    "generate_typescript_interface",
    "parse_json",
    "stringify_json_value",
    "validate_json",
]

# -*- coding: utf-8 -*-
"""类型声明生成入口

一次遍历构建声明树，再交给目标语言的渲染器输出文本。
纯函数，不做任何文件读写。
"""

import logging
from typing import Any, Callable, Dict, Mapping

from .declarations import TypeDeclaration, build_declaration
from .exceptions import UnsupportedLanguageError
from .json_to_jsdoc import render_jsdoc
from .json_to_ts import render_typescript

logger = logging.getLogger(__name__)

TYPESCRIPT = "typescript"
JAVASCRIPT = "javascript"

# language → (渲染器, 文件扩展名)
RENDERERS: Dict[str, Callable[[TypeDeclaration, bool, str], str]] = {
    TYPESCRIPT: render_typescript,
    JAVASCRIPT: render_jsdoc,
}
EXTENSIONS = {
    TYPESCRIPT: ".ts",
    JAVASCRIPT: ".js",
}
LANGUAGE_ALIASES = {
    "static-typed": TYPESCRIPT,
    "doc-comment": JAVASCRIPT,
}


def normalize_language(language: str) -> str:
    """把别名 static-typed / doc-comment 归一为 typescript / javascript。"""
    name = LANGUAGE_ALIASES.get(language, language)
    if name not in RENDERERS:
        raise UnsupportedLanguageError(language, list(RENDERERS) + list(LANGUAGE_ALIASES))
    return name


def emit(value: Mapping[str, Any], type_name: str, export_public: bool = True,
         language: str = TYPESCRIPT, untyped: str = "any",
         strict: bool = False) -> str:
    """将 JSON 对象转换为目标语言的类型声明文本。

    对象数组只以第一个元素推断元素类型，其余元素的差异会被忽略。

    Raises:
        RootNotObjectError: value 不是 JSON 对象
        UnknownValueError: strict 为 True 且遇到无法归类的值
        UnsupportedLanguageError: 不支持的 language
    """
    render = RENDERERS[normalize_language(language)]
    decl = build_declaration(value, type_name, strict=strict)
    logger.debug("Emitting %d declaration(s) for %s as %s",
                 decl.count(), type_name, language)
    return render(decl, export_public, untyped)


def generate_typescript_interface(data: Mapping[str, Any], interface_name: str,
                                  export_model: bool = True) -> str:
    return emit(data, interface_name, export_model, TYPESCRIPT)


def generate_javascript_types(data: Mapping[str, Any], type_name: str,
                              export_model: bool = True) -> str:
    return emit(data, type_name, export_model, JAVASCRIPT)

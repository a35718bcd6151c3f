# -*- coding: utf-8 -*-
"""JsonForge 异常类型"""


class JsonForgeError(Exception):
    """所有 JsonForge 错误的基类。"""


class RootNotObjectError(JsonForgeError, TypeError):
    """根值不是 JSON 对象，无法生成类型声明。"""

    def __init__(self, value):
        self.value = value
        super().__init__(
            "Model generation requires a JSON object at the root, "
            f"got {type(value).__name__}")


class UnknownValueError(JsonForgeError, TypeError):
    """严格模式下遇到无法归类的值。"""

    def __init__(self, path: str, value):
        self.path = path
        self.value = value
        super().__init__(
            f"Cannot infer a type for {path} "
            f"(value of type {type(value).__name__})")


class UnsupportedLanguageError(JsonForgeError, ValueError):
    """未注册的目标语言。"""

    def __init__(self, language: str, supported):
        self.language = language
        super().__init__(
            f"Unsupported model language {language!r}; "
            f"expected one of: {', '.join(supported)}")


class JsonDecodeFailure(JsonForgeError, ValueError):
    """JSON 文本解析失败，message 为可读的错误描述。"""

# -*- coding: utf-8 -*-
"""JSON 值类型推断

对单个 JSON 值做分类，结果与目标语言无关，
由 declarations 构建声明树、各渲染器再翻译成具体类型记号。
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Optional


class Kind(str, Enum):
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNKNOWN = "unknown"
    OBJECT = "object"
    ARRAY_OF_PRIMITIVE = "array_of_primitive"
    ARRAY_OF_OBJECT = "array_of_object"
    EMPTY_ARRAY = "empty_array"


@dataclass(frozen=True)
class Classification:
    """一个值的分类。element 仅在 ARRAY_OF_PRIMITIVE 时给出首元素的分类。"""

    kind: Kind
    element: Optional["Classification"] = None

    @property
    def needs_declaration(self) -> bool:
        """对象与对象数组需要单独生成一个具名类型。"""
        return self.kind in (Kind.OBJECT, Kind.ARRAY_OF_OBJECT)


NULL = Classification(Kind.NULL)
STRING = Classification(Kind.STRING)
NUMBER = Classification(Kind.NUMBER)
BOOLEAN = Classification(Kind.BOOLEAN)
UNKNOWN = Classification(Kind.UNKNOWN)
OBJECT = Classification(Kind.OBJECT)
ARRAY_OF_OBJECT = Classification(Kind.ARRAY_OF_OBJECT)
EMPTY_ARRAY = Classification(Kind.EMPTY_ARRAY)


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def classify(value: Any) -> Classification:
    """推断类型。数组只看第一个元素，不检查其余元素是否同构。"""
    if value is None:
        return NULL
    if is_array(value):
        if not value:
            return EMPTY_ARRAY
        first = value[0]
        if is_object(first):
            return ARRAY_OF_OBJECT
        return Classification(Kind.ARRAY_OF_PRIMITIVE, classify(first))
    if is_object(value):
        return OBJECT
    if isinstance(value, str):
        return STRING
    # bool 是 int 的子类，必须先判断
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (Real, Decimal)):
        return NUMBER
    return UNKNOWN

# -*- coding: utf-8 -*-
"""JSON 转代码 — 声明树构建

遍历根对象，为每个嵌套对象 / 对象数组合成具名类型，
得到与目标语言无关的声明树（类型名 + 有序成员），
供 TypeScript / JSDoc 等渲染器共用。

命名完全由路径决定：
    嵌套对象      父类型名 + 首字母大写的键名
    对象数组元素  父类型名 + 首字母大写的键名 + "Item"
相同结构出现在两个位置时会生成两个同构但不同名的声明。
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Mapping, Optional

from .exceptions import RootNotObjectError, UnknownValueError
from .inference import Classification, Kind, classify, is_object

ITEM_SUFFIX = "Item"


def capitalize(key: str) -> str:
    """首字母大写，其余保持不变。"""
    return key[:1].upper() + key[1:]


def nested_type_name(parent: str, key: str) -> str:
    return parent + capitalize(key)


def item_type_name(parent: str, key: str) -> str:
    return parent + capitalize(key) + ITEM_SUFFIX


@dataclass(frozen=True)
class TypeRef:
    """成员类型。对象 / 对象数组时 type_name 为合成的类型名。"""

    classification: Classification
    type_name: Optional[str] = None

    @property
    def kind(self) -> Kind:
        return self.classification.kind


@dataclass(frozen=True)
class FieldDeclaration:
    name: str
    type_ref: TypeRef


@dataclass
class TypeDeclaration:
    """一个具名类型：成员按原始键顺序排列，children 按成员顺序排列。"""

    name: str
    fields: List[FieldDeclaration] = field(default_factory=list)
    children: List["TypeDeclaration"] = field(default_factory=list)

    def walk(self) -> Iterator["TypeDeclaration"]:
        """按输出顺序产出所有声明：后出现的成员的子树在前，父声明最后。"""
        for child in reversed(self.children):
            yield from child.walk()
        yield self

    def count(self) -> int:
        return 1 + sum(child.count() for child in self.children)


def build_declaration(value: Mapping[str, Any], type_name: str,
                      strict: bool = False) -> TypeDeclaration:
    """为根对象构建声明树。

    Args:
        value: JSON 对象（dict 等 Mapping）
        type_name: 根类型名
        strict: 为 True 时遇到无法归类的值抛出 UnknownValueError，
                数组中的数组里的对象也会逐层检查

    Raises:
        RootNotObjectError: value 不是对象
    """
    if not is_object(value):
        raise RootNotObjectError(value)
    return _build(value, type_name, strict, type_name)


def _build(obj: Mapping[str, Any], type_name: str, strict: bool,
           path: str) -> TypeDeclaration:
    decl = TypeDeclaration(type_name)
    for key, val in obj.items():
        key = str(key)
        info = classify(val)
        member_path = f"{path}.{key}"
        if info.needs_declaration:
            if info.kind == Kind.OBJECT:
                child_name = nested_type_name(type_name, key)
                shape, shape_path = val, member_path
            else:
                # 只以第一个元素作为数组元素的结构
                child_name = item_type_name(type_name, key)
                shape, shape_path = val[0], f"{member_path}[0]"
            decl.children.append(_build(shape, child_name, strict, shape_path))
            ref = TypeRef(info, child_name)
        else:
            if strict:
                _check_known(info, val, member_path)
            ref = TypeRef(info)
        decl.fields.append(FieldDeclaration(key, ref))
    return decl


def _check_known(info: Classification, value: Any, path: str) -> None:
    """检查不生成具名类型的值（含数组中的数组里的对象）是否都可归类。"""
    while info.kind == Kind.ARRAY_OF_PRIMITIVE:
        info, value, path = info.element, value[0], f"{path}[0]"
    if info.kind == Kind.UNKNOWN:
        raise UnknownValueError(path, value)
    if info.kind == Kind.ARRAY_OF_OBJECT:
        value, path = value[0], f"{path}[0]"
    if is_object(value):
        for key, val in value.items():
            _check_known(classify(val), val, f"{path}.{key}")

# -*- coding: utf-8 -*-
"""声明树转 TypeScript interface 定义

嵌套数组按层展开：[[1]] 为 number[][]，[[{...}]] 为 object[][]。
与旧版 JsonForge 只标出一层（object[]）的输出不同，这一差异是有意保留的。
"""

from .declarations import TypeDeclaration, TypeRef
from .inference import Classification, Kind

DEFAULT_UNTYPED = "any"
BLOCK_SEPARATOR = "\n\n"


def _classification_to_ts(info: Classification, untyped: str) -> str:
    kind = info.kind
    if kind == Kind.NULL:
        return "null"
    if kind == Kind.STRING:
        return "string"
    if kind == Kind.NUMBER:
        return "number"
    if kind == Kind.BOOLEAN:
        return "boolean"
    if kind == Kind.EMPTY_ARRAY:
        return f"{untyped}[]"
    if kind == Kind.ARRAY_OF_PRIMITIVE:
        return f"{_classification_to_ts(info.element, untyped)}[]"
    # 数组中的数组：内层对象不生成具名类型
    if kind == Kind.ARRAY_OF_OBJECT:
        return "object[]"
    if kind == Kind.OBJECT:
        return "object"
    return untyped


def _ref_to_ts(ref: TypeRef, untyped: str) -> str:
    if ref.kind == Kind.OBJECT and ref.type_name:
        return ref.type_name
    if ref.kind == Kind.ARRAY_OF_OBJECT and ref.type_name:
        return f"{ref.type_name}[]"
    return _classification_to_ts(ref.classification, untyped)


def _generate_ts_interface(decl: TypeDeclaration, export: bool,
                           untyped: str) -> str:
    keyword = "export " if export else ""
    lines = [f"{keyword}interface {decl.name} {{"]
    for member in decl.fields:
        lines.append(f"  {member.name}: {_ref_to_ts(member.type_ref, untyped)};")
    lines.append("}")
    return "\n".join(lines)


def render_typescript(decl: TypeDeclaration, export: bool = True,
                      untyped: str = DEFAULT_UNTYPED) -> str:
    """渲染整棵声明树：嵌套类型在前，根类型在后，块之间空一行。"""
    parts = []
    for child in reversed(decl.children):
        parts.append(render_typescript(child, export, untyped))
        parts.append(BLOCK_SEPARATOR)
    parts.append(_generate_ts_interface(decl, export, untyped))
    return "".join(parts)

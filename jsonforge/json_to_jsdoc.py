# -*- coding: utf-8 -*-
"""声明树转 JSDoc @typedef 注释块

供不使用 TypeScript、依赖文档工具做类型提示的 JavaScript 项目使用。
数组统一写成 Array<T>，空数组写成不带参数的 Array。
嵌套数组逐层写成 Array<Array<number>>，而不是旧版 JsonForge 的
Array<number[]>，这一差异是有意保留的。
"""

from .declarations import TypeDeclaration, TypeRef
from .inference import Classification, Kind

DEFAULT_UNTYPED = "any"
EXPORT_PLACEHOLDER = "module.exports = {};\n"
BLOCK_SEPARATOR = "\n"


def _classification_to_jsdoc(info: Classification, untyped: str) -> str:
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
        return "Array"
    if kind == Kind.ARRAY_OF_PRIMITIVE:
        return f"Array<{_classification_to_jsdoc(info.element, untyped)}>"
    if kind == Kind.ARRAY_OF_OBJECT:
        return "Array<Object>"
    if kind == Kind.OBJECT:
        return "Object"
    return untyped


def _ref_to_jsdoc(ref: TypeRef, untyped: str) -> str:
    if ref.kind == Kind.OBJECT and ref.type_name:
        return ref.type_name
    if ref.kind == Kind.ARRAY_OF_OBJECT and ref.type_name:
        return f"Array<{ref.type_name}>"
    return _classification_to_jsdoc(ref.classification, untyped)


def _generate_typedef(decl: TypeDeclaration, export: bool,
                      untyped: str) -> str:
    lines = ["/**", f" * @typedef {{Object}} {decl.name}"]
    for member in decl.fields:
        js_type = _ref_to_jsdoc(member.type_ref, untyped)
        lines.append(f" * @property {{{js_type}}} {member.name}")
    lines.append(" */")
    block = "\n".join(lines) + "\n\n"
    if export:
        block += EXPORT_PLACEHOLDER
    return block


def render_jsdoc(decl: TypeDeclaration, export: bool = True,
                 untyped: str = DEFAULT_UNTYPED) -> str:
    """渲染整棵声明树：嵌套类型在前，根类型在后。"""
    parts = []
    for child in reversed(decl.children):
        parts.append(render_jsdoc(child, export, untyped))
        parts.append(BLOCK_SEPARATOR)
    parts.append(_generate_typedef(decl, export, untyped))
    return "".join(parts)

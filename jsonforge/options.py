# -*- coding: utf-8 -*-
"""JsonForge 配置项（pydantic 校验）"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .emitter import EXTENSIONS, normalize_language


class ForgeOptions(BaseModel):
    """解析 / 序列化 / 模型生成的全部选项，字段均有默认值。"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    generate_models: bool = Field(False, description="Write a model file on every parse")
    models_path: str = Field("./models", description="Directory for generated model files")
    language: Literal["typescript", "javascript"] = Field(
        "typescript", description="Model syntax: TypeScript interfaces or JSDoc typedefs")
    prettify: bool = Field(True, description="Indent stringified JSON")
    interface_name: str = Field("GeneratedModel", description="Root type name")
    export_models: bool = Field(True, description="Export the generated types")
    untyped: str = Field("any", min_length=1,
                         description="Type used for unknown values and empty arrays")
    strict: bool = Field(False, description="Fail on values that cannot be typed")

    @field_validator("language", mode="before")
    @classmethod
    def validate_language(cls, v: Any) -> Any:
        """接受 static-typed / doc-comment 别名"""
        if isinstance(v, str):
            return normalize_language(v)
        return v

    @field_validator("interface_name")
    @classmethod
    def validate_interface_name(cls, v: str) -> str:
        """根类型名必须是合法标识符"""
        v = v.strip()
        if not v.isidentifier():
            raise ValueError(f"{v!r} is not a valid type name")
        return v

    @property
    def file_extension(self) -> str:
        return EXTENSIONS[self.language]

    def merged(self, **changes: Any) -> "ForgeOptions":
        """返回合并修改后的新配置（重新校验）"""
        return ForgeOptions(**{**self.model_dump(), **changes})

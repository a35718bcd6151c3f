# -*- coding: utf-8 -*-
"""JSON 转类型模型面板（TypeScript interface / JSDoc typedef）"""

from PyQt5.QtWidgets import (
    QLineEdit, QLabel, QHBoxLayout, QComboBox, QCheckBox
)

from .base_panel import BasePanel
from jsonforge.emitter import EXTENSIONS, JAVASCRIPT, TYPESCRIPT, emit
from jsonforge.json_fmt import loads

DEFAULT_ROOT_NAME = "GeneratedModel"

# (显示名, language)
LANGUAGES = [
    ("TypeScript interface", TYPESCRIPT),
    ("JSDoc @typedef", JAVASCRIPT),
]


class JsonModelPanel(BasePanel):
    """输入 JSON 对象，输出对应的类型声明。

    嵌套对象生成 父类型名+键名 的类型，对象数组生成 ...Item 类型，
    数组元素结构只取第一个元素。
    """

    input_placeholder = (
        "粘贴 JSON 对象，例如:\n"
        '{"name": "John", "age": 30, "tags": ["a", "b"], '
        '"address": {"city": "NYC"}, "team": [{"id": 1}]}'
    )
    export_filter = "TypeScript (*.ts);;JavaScript (*.js);;所有文件 (*)"

    def build_controls(self, layout):
        row = QHBoxLayout()
        row.addWidget(QLabel("根类型名:"))
        self._root_name = QLineEdit()
        self._root_name.setPlaceholderText(DEFAULT_ROOT_NAME)
        self._root_name.setMaximumWidth(180)
        self._root_name.setText(DEFAULT_ROOT_NAME)
        row.addWidget(self._root_name)

        row.addSpacing(12)
        row.addWidget(QLabel("输出:"))
        self._language = QComboBox()
        for label, lang in LANGUAGES:
            self._language.addItem(label, lang)
        row.addWidget(self._language)

        row.addSpacing(12)
        self._export = QCheckBox("导出 (export)")
        self._export.setChecked(True)
        row.addWidget(self._export)

        row.addSpacing(12)
        row.addWidget(QLabel("未知类型:"))
        self._untyped = QLineEdit("any")
        self._untyped.setMaximumWidth(80)
        row.addWidget(self._untyped)
        row.addStretch()
        layout.addLayout(row)

    def root_name(self) -> str:
        return self._root_name.text().strip() or DEFAULT_ROOT_NAME

    def language(self) -> str:
        return self._language.currentData()

    def export_file_name(self) -> str:
        return f"{self.root_name()}{EXTENSIONS[self.language()]}"

    def process(self, text):
        # 非法 JSON 抛出 JsonDecodeFailure，由基类显示错误描述
        data = loads(text)
        return emit(
            data,
            self.root_name(),
            export_public=self._export.isChecked(),
            language=self.language(),
            untyped=self._untyped.text().strip() or "any",
        )

# -*- coding: utf-8 -*-
"""JSON 格式化 / 压缩 / 验证面板"""

from PyQt5.QtWidgets import (
    QHBoxLayout, QVBoxLayout, QLabel,
    QRadioButton, QButtonGroup, QGroupBox,
    QCheckBox, QSpinBox
)

from .base_panel import BasePanel
from jsonforge.json_fmt import format_json, minify_json, validate_json


class JsonPanel(BasePanel):

    export_filter = "JSON 文件 (*.json);;所有文件 (*)"

    def build_controls(self, layout):
        group = QGroupBox("JSON 选项")
        g = QVBoxLayout(group)

        r1 = QHBoxLayout()
        r1.addWidget(QLabel("操作:"))
        self._op_group = QButtonGroup(self)
        self._btn_format = QRadioButton("格式化")
        self._btn_minify = QRadioButton("压缩")
        self._btn_validate = QRadioButton("验证")
        self._btn_format.setChecked(True)
        for i, btn in enumerate((self._btn_format, self._btn_minify,
                                 self._btn_validate)):
            self._op_group.addButton(btn, i)
            r1.addWidget(btn)
        r1.addStretch()
        g.addLayout(r1)

        r2 = QHBoxLayout()
        r2.addWidget(QLabel("缩进:"))
        self._indent = QSpinBox()
        self._indent.setRange(1, 8)
        self._indent.setValue(2)
        self._indent.setFixedWidth(60)
        r2.addWidget(self._indent)
        r2.addSpacing(16)
        self._sort_keys = QCheckBox("排序键名")
        r2.addWidget(self._sort_keys)
        self._ensure_ascii = QCheckBox("ASCII 转义")
        r2.addWidget(self._ensure_ascii)
        r2.addStretch()
        g.addLayout(r2)

        layout.addWidget(group)

    def export_file_name(self) -> str:
        return "output.json"

    def process(self, text):
        if self._btn_format.isChecked():
            return format_json(
                text,
                indent=self._indent.value(),
                sort_keys=self._sort_keys.isChecked(),
                ensure_ascii=self._ensure_ascii.isChecked(),
            )
        if self._btn_minify.isChecked():
            return minify_json(text)
        _ok, msg = validate_json(text)
        return msg

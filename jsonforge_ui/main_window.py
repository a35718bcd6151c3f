# -*- coding: utf-8 -*-
"""主窗口 — 侧边栏导航 + 功能面板

布局:
    ┌─────────────┬──────────────────────────────┐
    │  Sidebar     │  Feature Panel               │
    │  200px       │  (QStackedWidget)            │
    └─────────────┴──────────────────────────────┘
"""

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QLabel, QPushButton, QStackedWidget, QFrame,
)
from PyQt5.QtGui import QCursor
from PyQt5.QtCore import Qt

from .panels.json_model_panel import JsonModelPanel
from .panels.json_panel import JsonPanel

# (显示名, 简介, Panel类)
FEATURES = [
    ("JSON 转模型", "由 JSON 生成 TypeScript interface / JSDoc 类型", JsonModelPanel),
    ("JSON 格式化", "JSON 美化、压缩、语法验证", JsonPanel),
]

NAV_STYLE = """
    QPushButton {{
        text-align:left; padding:0 20px 0 22px;
        border:none; border-radius:6px;
        margin:1px 10px; color:{color};
        background:{background};
        font-size:13px; font-weight:{weight};
    }}
    QPushButton:hover {{ background:{hover}; }}
"""


def _nav_style(active: bool) -> str:
    if active:
        return NAV_STYLE.format(color="#ffffff", background="#0078d4",
                                weight="bold", hover="#106ebe")
    return NAV_STYLE.format(color="#b0b8c4", background="transparent",
                            weight="normal", hover="rgba(255,255,255,0.07)")


class MainWindow(QMainWindow):

    def __init__(self):
        super().__init__()
        self._nav_btns = []
        self.setWindowTitle("JsonForge — JSON 模型生成")
        self.resize(1100, 700)
        self.setMinimumSize(820, 520)
        self._build_ui()
        self.go_panel(0)

    def _build_ui(self):
        central = QWidget()
        root = QHBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        root.addWidget(self._build_sidebar())

        self._stack = QStackedWidget()
        self._stack.setObjectName("contentArea")
        self._stack.setStyleSheet(
            "#contentArea{background:#f0f2f5; border:none;}")
        for _name, _desc, PanelClass in FEATURES:
            self._stack.addWidget(PanelClass())
        root.addWidget(self._stack, stretch=1)
        self.setCentralWidget(central)

    def _build_sidebar(self):
        sidebar = QWidget()
        sidebar.setFixedWidth(200)
        sidebar.setStyleSheet("background:#1a1f2e;")
        layout = QVBoxLayout(sidebar)
        layout.setContentsMargins(0, 20, 0, 16)
        layout.setSpacing(0)

        title = QLabel("JsonForge")
        title.setStyleSheet(
            "color:#ffffff; font-size:20px; font-weight:bold; "
            "padding:0 22px; background:transparent;")
        layout.addWidget(title)
        sep = QFrame()
        sep.setFixedHeight(1)
        sep.setStyleSheet("background:#2e3650; border:none; margin:12px 0;")
        layout.addWidget(sep)

        for i, (name, desc, _cls) in enumerate(FEATURES):
            btn = QPushButton(f"  {name}")
            btn.setFixedHeight(38)
            btn.setToolTip(desc)
            btn.setCursor(QCursor(Qt.PointingHandCursor))
            btn.clicked.connect(lambda checked, idx=i: self.go_panel(idx))
            layout.addWidget(btn)
            self._nav_btns.append(btn)

        layout.addStretch()
        return sidebar

    def go_panel(self, index: int):
        self._stack.setCurrentIndex(index)
        for i, btn in enumerate(self._nav_btns):
            btn.setStyleSheet(_nav_style(i == index))

    def current_panel(self):
        return self._stack.currentWidget()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""JsonForge — JSON 模型生成工具  入口"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QFont, QPalette, QColor
from PyQt5.QtCore import Qt

from jsonforge.log_setup import setup_logging


def main():
    parser = argparse.ArgumentParser(description="JsonForge desktop")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", default=None)
    args, qt_args = parser.parse_known_args()
    setup_logging(args.log_level, args.log_file)

    # High-DPI 支持
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv[:1] + qt_args)
    app.setStyle('Fusion')

    font = QFont("Microsoft YaHei UI", 11)
    font.setStyleHint(QFont.SansSerif)
    app.setFont(font)

    palette = QPalette()
    palette.setColor(QPalette.Window,          QColor("#f0f2f5"))
    palette.setColor(QPalette.WindowText,      QColor("#1e2433"))
    palette.setColor(QPalette.Base,            QColor("#ffffff"))
    palette.setColor(QPalette.Text,            QColor("#1e2433"))
    palette.setColor(QPalette.Button,          QColor("#e8eaed"))
    palette.setColor(QPalette.ButtonText,      QColor("#1e2433"))
    palette.setColor(QPalette.Highlight,       QColor("#0078d4"))
    palette.setColor(QPalette.HighlightedText, QColor("#ffffff"))
    app.setPalette(palette)

    from jsonforge_ui.main_window import MainWindow
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()

# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger
import os

# Qt 面板测试无需显示器
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Third party imports
import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset root logger handlers so tests never share configuration"""
    root_logger = getLogger()
    saved_level = root_logger.level
    saved_handlers = root_logger.handlers[:]
    yield
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)


@pytest.fixture
def company_data():
    """Nested company document used across emitter tests"""
    return {
        "company": {
            "name": "Acme",
            "address": {
                "street": "1 Main St",
                "city": "Springfield",
                "coordinates": {"lat": 40.7, "lng": -74.0},
            },
            "contact": {
                "email": "info@acme.test",
                "phone": {"mobile": "555-0100", "office": "555-0101"},
            },
        }
    }


@pytest.fixture
def api_response_data():
    """API response with an array of objects and an empty array"""
    return {
        "status": "ok",
        "data": {
            "items": [
                {
                    "id": "a1",
                    "name": "Widget",
                    "price": 9.5,
                    "attributes": {"color": "red", "size": "M"},
                }
            ],
            "pagination": {"page": 1, "perPage": 10, "total": 1},
        },
        "errors": [],
    }


@pytest.fixture(scope="session")
def qapp():
    """Shared offscreen QApplication; skipped when PyQt5 is unavailable"""
    qt_widgets = pytest.importorskip("PyQt5.QtWidgets")
    app = qt_widgets.QApplication.instance() or qt_widgets.QApplication([])
    yield app

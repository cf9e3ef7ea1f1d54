# tests/conftest.py
"""Pytest configuration and shared fixtures."""
import pytest


@pytest.fixture
def egg_props():
    """Small three-language dictionary, English first (default)."""
    return {
        "en": {
            "how": "How do you want your egg today?",
            "boiled": "Boiled egg",
            "softBoiled": "Soft-boiled egg",
            "choice": "How to choose the egg",
            "question": "I'd like some {0} and {1}",
            "greet": {"morning": "Good morning", "evening": "Good evening"},
        },
        "it": {
            "how": "Come vuoi il tuo uovo oggi?",
            "boiled": "Uovo sodo",
            "softBoiled": "Uovo alla coque",
            "greet": {"morning": "Buongiorno"},
        },
        "en-US": {
            "choice": "How to pick the egg",
        },
    }

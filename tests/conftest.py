"""
Pytest configuration and shared fixtures
"""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from sentence_checker.core.rules import REFERENCE_RULES
from sentence_checker.models.rule import RuleConfig


@pytest.fixture
def because_config():
    return RuleConfig(min_words=8, required_words=("because",), require_conditional=False)


@pytest.fixture
def conditional_config():
    return RuleConfig(min_words=10, required_words=(), require_conditional=True)


@pytest.fixture
def reference_rules():
    return REFERENCE_RULES


@pytest.fixture
def good_submissions():
    """One full-marks-or-close sentence per reference exercise"""
    return {
        "s1": "I stayed home because it was raining heavily outside today.",
        "s2": "Although it was late, we kept talking for many hours.",
        "s3": "If I had more time, I would travel around the whole world.",
    }

"""Pytest fixtures for test configuration.

Global test safety measures:
 - Strip LFM__* variables from the environment so the developer's shell or
   CI settings never leak into defaults
 - .env loading is already skipped under pytest (see lfm.config.load_config)
"""
import os
from typing import Any, Dict

import pytest


@pytest.fixture(autouse=True)
def clean_lfm_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith('LFM__'):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv('LFM_ENABLE_DOTENV', raising=False)


@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests should pass it to the CLI via ``obj=`` rather than setting
    environment variables.
    """
    return {
        'log_level': 'DEBUG',
        'matching': {
            'precision': 'none',
            'max_results': 10,
            'suggest_typos': True,
            'suggest_limit': 3,
            'suggest_cutoff': 70.0,
        },
        'scoring': {
            'weight_char': 4,
            'bonus_consecutive': 8,
            'bonus_word_boundary': 6,
            'bonus_case_match': 2,
            'penalty_gap_char': 1,
            'weight_coverage': 8,
        },
    }

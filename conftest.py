import os
import sys

import pytest

# backend/ holds the importable packages (apps, qkart)
BASE_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.join(BASE_DIR, 'backend')
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)


@pytest.fixture(autouse=True)
def clear_cache():
    """Product listings are cached; start every test from an empty cache."""
    from django.core.cache import cache

    cache.clear()
    yield
    cache.clear()

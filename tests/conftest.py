"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed flexrecord package.
"""

import pytest

from flexrecord.reviews import progressive_review_codec


@pytest.fixture
def codec():
    """Progressive review codec with the default key mapping."""
    return progressive_review_codec()


@pytest.fixture
def scenario_wire():
    """Wire object for a rated, titled review with one photo URL."""
    return {"rating": 5, "title": "Great", "photourl_1": "http://x/1.jpg"}

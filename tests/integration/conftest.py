"""Per-test seed and teardown for the live HTTP suite."""
from typing import List

import pytest

from blog.models import Post


@pytest.fixture(autouse=True)
def posts(seeded_posts: List[Post]) -> List[Post]:
    """Every test here starts on freshly seeded posts and ends with a drop."""
    return seeded_posts

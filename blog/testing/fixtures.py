"""Synthetic post data for seeding and request payloads."""
import logging
import random
from typing import Dict, List, Optional

from ..infrastructure.repositories import PostRepository
from ..models import Post

logger = logging.getLogger(__name__)

SEED_COUNT = 10

FIRST_NAMES = (
    "Ada", "Alan", "Barbara", "Claude", "Dennis", "Donald", "Edsger", "Frances",
    "Grace", "Guido", "Jean", "Ken", "Linus", "Margaret", "Niklaus", "Radia",
    "Sophie", "Tim", "Vint", "Yukihiro",
)

LAST_NAMES = (
    "Allen", "Backus", "Cerf", "Dijkstra", "Hamilton", "Hopper", "Kernighan",
    "Knuth", "Lamport", "Liskov", "Lovelace", "Matsumoto", "Perlman", "Ritchie",
    "Rossum", "Shannon", "Thompson", "Torvalds", "Turing", "Wirth",
)

WORDS = (
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit",
    "sed", "do", "eiusmod", "tempor", "incididunt", "ut", "labore", "et", "dolore",
    "magna", "aliqua", "enim", "ad", "minim", "veniam", "quis", "nostrud",
    "exercitation", "ullamco", "laboris", "nisi", "aliquip", "ex", "ea", "commodo",
    "consequat", "duis", "aute", "irure", "in", "reprehenderit", "voluptate",
    "velit", "esse", "cillum", "fugiat", "nulla", "pariatur", "excepteur", "sint",
    "occaecat", "cupidatat", "non", "proident", "sunt", "culpa", "qui", "officia",
    "deserunt", "mollit", "anim", "id", "est", "laborum",
)

_rng = random.Random()


def seed_random(seed: Optional[int]) -> None:
    """Make generated data reproducible (``None`` reseeds from the OS)."""
    _rng.seed(seed)


def _sentence(rng: random.Random, min_words: int = 4, max_words: int = 10) -> str:
    words = rng.choices(WORDS, k=rng.randint(min_words, max_words))
    return " ".join(words).capitalize() + "."


def _text(rng: random.Random, min_sentences: int = 3, max_sentences: int = 8) -> str:
    return " ".join(_sentence(rng) for _ in range(rng.randint(min_sentences, max_sentences)))


def generate_post_data(rng: Optional[random.Random] = None) -> Dict:
    """One post-input payload with a random title, author and content."""
    rng = rng or _rng
    return {
        "title": _sentence(rng),
        "author": {
            "firstName": rng.choice(FIRST_NAMES),
            "lastName": rng.choice(LAST_NAMES),
        },
        "content": _text(rng),
    }


async def seed_post_data(repository: PostRepository, count: int = SEED_COUNT) -> List[Post]:
    """Bulk-insert ``count`` synthetic posts and return them once committed."""
    logger.info("seeding blog data")
    return await repository.insert_many(generate_post_data() for _ in range(count))

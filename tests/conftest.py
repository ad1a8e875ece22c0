import pytest

from profanity_filter import ProfanityFilter


@pytest.fixture(scope="session")
def profanity_filter() -> ProfanityFilter:
    # Compiling every pattern is the slow part; share one instance
    return ProfanityFilter()

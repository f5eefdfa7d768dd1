import pytest

from tests.helpers import FakeExtractor


@pytest.fixture
def extractor() -> FakeExtractor:
    return FakeExtractor()

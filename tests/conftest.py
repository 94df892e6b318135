import pytest

from ringzipper import Zipper


@pytest.fixture
def digits():
    return Zipper(range(10))


@pytest.fixture
def empty():
    return Zipper()

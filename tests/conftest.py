import pytest

from stubs import make_route


@pytest.fixture
def start():
    # (lon, lat)
    return (-73.0, 40.0)


@pytest.fixture
def route():
    return make_route()

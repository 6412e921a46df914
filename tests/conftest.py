import os

import pytest

from bitsequence import BitString, BitStringImmutable


def pytest_addoption(parser):
    parser.addoption(
        "--bits-debug",
        action="store_true",
        help="Enable bitsequence debug logging during tests",
    )


def pytest_configure(config):
    if config.getoption("--bits-debug"):
        os.environ["BITSEQUENCE_DEBUG"] = "1"
        from bitsequence import configure_logging
        configure_logging(enabled=True)


@pytest.fixture(params=[BitString, BitStringImmutable], ids=["mutable", "immutable"])
def variant(request):
    """Each test runs once per bit sequence flavour."""
    return request.param

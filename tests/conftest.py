import logging
import openac
import pytest


@pytest.fixture
def store():
    """ A private attribute store, so that slot values written by one test
        never leak into another.
    """

    yield openac.attributes.Store()


@pytest.fixture
def handle():

    logger = logging.getLogger('openac.test')
    installed = openac.api.install(openac.api.Api(logger))

    yield installed

    openac.api.clear()


@pytest.fixture
def no_handle():

    openac.api.clear()
    yield


@pytest.fixture
def channels():

    main, child = openac.channel.pair()

    yield main, child

    main.close()
    child.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

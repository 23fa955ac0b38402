import openac
import pytest

from openac import protocol
from openac.protocol import CONFIG, RECORD, KEEPALIVE


def test_tags():

    assert len(protocol.TAGS) == 3

    for tag in (CONFIG, RECORD, KEEPALIVE):
        assert tag in protocol.TAGS
        assert isinstance(tag, str)


def test_bare_tags():

    assert protocol.config() == CONFIG
    assert protocol.record() == RECORD
    assert protocol.keepalive() == KEEPALIVE

    assert protocol.config([]) == CONFIG
    assert protocol.record(()) == RECORD


def test_predicates():

    assert protocol.is_config(protocol.config()) == True
    assert protocol.is_record(protocol.record()) == True
    assert protocol.is_keepalive(protocol.keepalive()) == True

    predicates = (protocol.is_config, protocol.is_record, protocol.is_keepalive)
    tags = (CONFIG, RECORD, KEEPALIVE)

    for predicate,matching in zip(predicates, tags):
        for tag in tags:
            if tag == matching:
                assert predicate(tag) == True
            else:
                assert predicate(tag) == False

        assert predicate(None) == False
        assert predicate('') == False

    # Only the bare tag is recognized, never a full message.

    assert protocol.is_config(protocol.config('global', 'instance')) == False
    assert protocol.is_record(protocol.record(1, 2, 3)) == False


def test_config():

    message = protocol.config(['global', 'instance'])
    assert message == (CONFIG, 'global', 'instance')

    message = protocol.config('global', 'instance')
    assert message == (CONFIG, 'global', 'instance')

    assert protocol.flatten(message) == (CONFIG, 'global', 'instance')


def test_record():

    fields = ['alpha', 2, 3.5, None]

    as_sequence = protocol.record(fields)
    as_arguments = protocol.record(*fields)

    assert as_sequence == as_arguments
    assert as_sequence == (RECORD, 'alpha', 2, 3.5, None)

    # Falsy leading fields are still fields.

    assert protocol.record(0) == (RECORD, 0)
    assert protocol.record('', 'x') == (RECORD, '', 'x')


def test_keepalive_fields():

    with pytest.raises(TypeError):
        protocol.keepalive(1)

    with pytest.raises(TypeError):
        protocol.keepalive(['field'])


def test_no_message():

    assert protocol.config({'not': 'a sequence'}) is None
    assert protocol.record({'not': 'a sequence'}) is None
    assert protocol.flatten(None) == ()


def test_flatten():

    assert protocol.flatten(KEEPALIVE) == (KEEPALIVE,)
    assert protocol.flatten(protocol.config()) == (CONFIG,)
    assert protocol.flatten([RECORD, 1]) == (RECORD, 1)

    tag, *fields = protocol.flatten(protocol.record('a', 'b'))
    assert tag == RECORD
    assert fields == ['a', 'b']


def test_build():

    assert protocol.build(CONFIG) == CONFIG
    assert protocol.build(RECORD, [1, 2]) == (RECORD, 1, 2)

    with pytest.raises(ValueError):
        protocol.build('MSG::BOGUS')


def test_classify():

    assert protocol.classify(CONFIG) == CONFIG
    assert protocol.classify(protocol.record(1, 2)) == RECORD
    assert protocol.classify([KEEPALIVE]) == KEEPALIVE

    assert protocol.classify(None) is None
    assert protocol.classify(()) is None
    assert protocol.classify('MSG::BOGUS') is None
    assert protocol.classify(('MSG::BOGUS', 1)) is None


def test_payload():

    assert protocol.payload(CONFIG) == ()
    assert protocol.payload(protocol.config('g', 'i')) == ('g', 'i')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

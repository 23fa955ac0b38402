import openac

from openac import config


def test_slots():

    declared = config.slots()

    assert len(declared) == 12

    for phase in config.phases:
        assert declared[phase + '_timeout'] == openac.attributes.SCALAR
        assert declared[phase + '_attempts'] == openac.attributes.SCALAR


def test_setting(monkeypatch):

    monkeypatch.delenv('OPENAC_ABORT_TIMEOUT', raising=False)
    assert config.setting('abort_timeout', 7) == 7

    monkeypatch.setenv('OPENAC_ABORT_TIMEOUT', '12')
    assert config.setting('abort_timeout') == 12

    monkeypatch.setenv('OPENAC_ABORT_TIMEOUT', ' 2.5 ')
    assert config.setting('abort_timeout') == 2.5

    monkeypatch.setenv('OPENAC_ABORT_TIMEOUT', 'soon')
    assert config.setting('abort_timeout') == 'soon'


def test_apply(store, monkeypatch):

    monkeypatch.setenv('OPENAC_HOST_ATTEMPTS', '9')

    namespace = config.apply(openac.Module, {'process_timeout': 45}, store)

    assert namespace is store.namespace(openac.Module)
    assert namespace.get('initialize_timeout') == config.defaults['initialize_timeout']
    assert namespace.get('host_attempts') == 9
    assert namespace.get('process_timeout') == 45


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

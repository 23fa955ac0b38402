import openac
import pytest

from openac import channel


def test_resolve():

    child_end = object()
    main_end = object()

    assert channel.resolve(channel.Child(child_end)) is child_end
    assert channel.resolve(channel.Main(main_end)) is main_end
    assert channel.resolve(channel.UNASSIGNED) is None
    assert channel.resolve(object()) is None


def test_roles():

    thing = object()

    assert channel.Main(thing) == channel.Main(thing)
    assert channel.Main(thing) != channel.Child(thing)
    assert channel.Unassigned() == channel.UNASSIGNED
    assert channel.UNASSIGNED.channel is None


def test_pair(channels):

    main, child = channels

    main.send((b'one', b'two'))
    assert child.recv(timeout=1) == [b'one', b'two']

    child.send((b'back',))
    assert main.recv(timeout=1) == [b'back']


def test_timeout(channels):

    main, child = channels
    assert child.recv(timeout=0.01) is None


def test_closed():

    main, child = channel.pair()
    main.close()
    child.close()

    assert main.closed

    with pytest.raises(channel.ChannelError):
        main.send((b'late',))

    with pytest.raises(channel.ChannelError):
        child.recv(timeout=0)

    # Closing twice is harmless.

    main.close()


def test_socket_directory(tmp_path, monkeypatch):

    sockets = tmp_path / 'sockets'
    monkeypatch.setenv('OPENAC_SOCKET_DIR', str(sockets))

    assert channel.socket_directory() == str(sockets)
    assert sockets.is_dir()

    address = channel.ipc_address('unit')
    assert address == 'ipc://' + str(sockets / 'unit')


def test_socket_directory_default(tmp_path, monkeypatch):

    monkeypatch.delenv('OPENAC_SOCKET_DIR', raising=False)
    monkeypatch.setattr(channel.tempfile, 'gettempdir', lambda: str(tmp_path))
    monkeypatch.setattr(channel.getpass, 'getuser', lambda: 'unit')

    assert channel.socket_directory() == str(tmp_path / 'openac-unit')


def test_ipc_channel(tmp_path, monkeypatch):

    monkeypatch.setenv('OPENAC_SOCKET_DIR', str(tmp_path))

    main, child = channel.pair(channel.ipc_address('pair'))

    try:
        child.send((b'over ipc',))
        assert main.recv(timeout=5) == [b'over ipc']
    finally:
        main.close()
        child.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

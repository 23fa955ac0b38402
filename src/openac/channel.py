""" Communication channels between the main process and the child process
    of a module instance, and the logic that decides which end of a channel
    a given module instance should be talking to.

    A module instance handle exists in two places: the main process keeps
    one to represent each forked child (the :class:`Main` role), and the
    child process has its own (the :class:`Child` role). The same module code
    runs in either place; :func:`resolve` picks the right endpoint.
"""

import getpass
import itertools
import os
import tempfile
import threading
import zmq

from . import config


class ChannelError(Exception):
    """ A message could not be handed to a channel.
    """



class Role:
    """ Base class for the role of a module instance handle. A role carries
        the *channel* that handle uses; :class:`Unassigned` carries none.
    """

    name = None

    def __init__(self, channel=None):
        self.channel = channel


    def __eq__(self, other):
        return type(self) is type(other) and self.channel is other.channel


    def __hash__(self):
        return hash((type(self), id(self.channel)))


    def __repr__(self):
        return 'channel.%s(%s)' % (type(self).__name__, repr(self.channel))


# end of class Role



class Main(Role):
    """ This handle lives in the main process and represents a forked child;
        the channel leads to that child.
    """

    name = 'main'



class Child(Role):
    """ This handle lives in the forked child itself; the channel leads back
        to the main process.
    """

    name = 'child'



class Unassigned(Role):
    """ No role has been determined yet, for example before forking, or when
        running without any interprocess communication.
    """

    name = 'unassigned'

    def __init__(self):
        Role.__init__(self, None)


UNASSIGNED = Unassigned()



def resolve(target):
    """ Return the channel for *target*, which is either a :class:`Role` or
        anything with a ``role`` attribute, such as a module instance. A
        child role is checked first, then a main role. Returns None if
        neither is present.
    """

    if isinstance(target, Role):
        role = target
    else:
        role = getattr(target, 'role', None)

    if isinstance(role, Child):
        return role.channel

    if isinstance(role, Main):
        return role.channel

    return None



_contexts = dict()
_contexts_lock = threading.Lock()


def context():
    """ Return the ZeroMQ context for the current process. A context must
        not be used across a fork; a child process will get its own.
    """

    pid = os.getpid()

    with _contexts_lock:
        try:
            return _contexts[pid]
        except KeyError:
            pass

        new_context = zmq.Context()
        _contexts[pid] = new_context
        return new_context



class Channel:
    """ One end of a point-to-point channel, backed by a ZeroMQ PAIR socket.
        Messages travel as multipart frames; the :class:`Channel` does not
        interpret the frames in any way, that is the job of whoever calls
        :func:`send` and :func:`recv`.

        One end is expected to :func:`bind` and the other to :func:`connect`.
        For a forked child the main process binds before forking, and the
        child connects afterwards.
    """

    def __init__(self, address=None):

        self.address = address
        self.socket = context().socket(zmq.PAIR)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.poller = zmq.Poller()
        self.poller.register(self.socket, zmq.POLLIN)


    def __repr__(self):
        return 'channel.Channel(%s)' % (repr(self.address))


    @property
    def closed(self):
        return self.socket.closed


    def bind(self, address):
        self.socket.bind(address)
        self.address = address
        return self


    def connect(self, address):
        self.socket.connect(address)
        self.address = address
        return self


    def close(self):
        if self.socket.closed:
            return

        self.poller.unregister(self.socket)
        self.socket.close()


    def send(self, frames):
        """ Send the sequence of byte strings *frames* as a single multipart
            message.
        """

        if self.socket.closed:
            raise ChannelError('channel is closed: ' + repr(self.address))

        self.socket.send_multipart(frames)


    def recv(self, timeout=None):
        """ Return the next multipart message as a list of byte strings. If
            *timeout* (in seconds) is given and nothing arrives in time,
            None is returned; otherwise block until a message arrives.
        """

        if self.socket.closed:
            raise ChannelError('channel is closed: ' + repr(self.address))

        if timeout is not None:
            milliseconds = int(timeout * 1000)
            ready = dict(self.poller.poll(milliseconds))

            if self.socket in ready:
                pass
            else:
                return None

        return self.socket.recv_multipart()


# end of class Channel



def socket_directory():
    """ Return the directory holding the socket files for ipc:// channels,
        creating it if necessary. The ``OPENAC_SOCKET_DIR`` environment
        variable selects the directory; otherwise it is a per-user directory
        under the system temporary directory.
    """

    directory = config.setting('socket_dir')

    if directory is None:
        user = 'openac-' + getpass.getuser()
        directory = os.path.join(tempfile.gettempdir(), user)

    directory = str(directory)

    if os.path.isdir(directory):
        pass
    else:
        os.makedirs(directory, mode=0o700)

    if os.access(directory, os.W_OK) != True:
        raise ChannelError('cannot write to socket directory: ' + directory)

    return directory



def ipc_address(name):
    """ Return an ipc:// address for *name* in the :func:`socket_directory`.
        Addresses of this kind survive a fork, unlike inproc://.
    """

    return 'ipc://' + os.path.join(socket_directory(), name)


_pair_ids = itertools.count()


def pair(address=None):
    """ Return a connected (main, child) pair of :class:`Channel` instances.
        The main end binds to *address* and the child end connects to it;
        a unique inproc:// address is used if none is given, which is only
        suitable when both ends live in the same process.
    """

    if address is None:
        address = 'inproc://openac-channel-%d-%d' % (os.getpid(), next(_pair_ids))

    main = Channel().bind(address)
    child = Channel().connect(address)

    return (main, child)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

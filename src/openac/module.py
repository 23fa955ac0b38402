""" The base class for every OpenAC module.

    A module class is instantiated once per configuration. The main process
    keeps one instance per module to represent the forked child running it,
    and the child has its own instance; which one a given handle is, is
    recorded by its role (see :mod:`openac.channel`). The same module code
    runs in both places: :func:`Module.put_record` and friends deliver
    messages in the right direction without the caller needing to know
    where it is running.
"""

import logging
import traceback

from . import api as apimodule
from . import attributes
from . import channel as channelmodule
from . import config as configmodule
from . import protocol


logger = logging.getLogger('openac.module')


class Module(dict):
    """ A :class:`Module` instance is its own configuration: the mapping
        handed to :func:`instantiate` becomes the contents of the instance,
        and the module reads its settings the same way it would read any
        other dictionary.

        Settings that apply to every instance of a module class, such as the
        lifecycle timeouts, live in the attribute :class:`Namespace` for the
        class instead. Any call of the form ``<op>_<name>()``, where *op* is
        one of get, set, put, push, pop, unshift, or shift, and the module
        does not define a method with that exact name, operates on the slot
        *name* in that namespace:

            module.set_process_timeout(60)
            module.get_process_timeout()        # returns 60

        The slots a module class may use are declared in its ``slots``
        table, which is merged with the tables of its base classes. Misuse
        of these accessors is logged, and the call returns None; it never
        raises an exception.

        The *store* argument is the :class:`attributes.Store` to take the
        namespace from; the process-wide store is used if none is given.
    """

    slots = configmodule.slots()

    role = channelmodule.UNASSIGNED
    namespace = None

    def __init__(self, configuration=None, store=None):

        if configuration is None:
            configuration = dict()

        dict.__init__(self, configuration)

        if store is None:
            store = attributes.store

        self.role = channelmodule.UNASSIGNED
        self.namespace = store.namespace(type(self))


    @classmethod
    def instantiate(cls, configuration, store=None):
        """ Create a new instance of this module class from the
            *configuration* mapping. No validation is performed.
        """

        return cls(configuration, store)


    def __getattr__(self, name):

        # Private and special names are never accessors.

        if name.startswith('_'):
            raise AttributeError(name)

        return _Accessor(self, name)


    def __repr__(self):
        return '%s(%s, %s)' % (type(self).__name__, dict.__repr__(self), repr(self.role))


    def daemonize(self, *args):
        """ Called once the module instance has been forked into its own
            child process. Return the storage the child will use for its
            runtime state; the default is an empty dictionary. Modules that
            need more specific launch-time state should override this method.
        """

        return dict()


    def api(self):
        """ Return the API handle for this process, or None if there is
            none.
        """

        try:
            return apimodule.get()
        except apimodule.ApiUnavailable:
            return None


    def _require_api(self):

        handle = self.api()

        if handle is None:
            raise apimodule.ApiUnavailable('no API handle available to ' + type(self).__name__)

        return handle


    def assign(self, role):
        """ Attach the process *role* for this handle; this is one of
            :class:`channel.Main`, :class:`channel.Child`, or
            :class:`channel.Unassigned`.
        """

        if isinstance(role, channelmodule.Role):
            pass
        else:
            raise TypeError('expected a channel.Role, got ' + repr(role))

        self.role = role


    def channel(self):
        """ Return the channel this handle should use. Called from the main
            process, this is the channel to the module's child process;
            called from the child, it is the channel back to the main
            process. Returns None if no role has been assigned.
        """

        return channelmodule.resolve(self)


    def _destination(self, channel):

        if channel is None:
            return self.channel()

        return channel


    def lifecycle(self, phase):
        """ Return the (timeout, attempts) pair for the lifecycle *phase*,
            one of 'initialize', 'reinitialize', 'process', 'abort',
            'cleanup', or 'host'.
        """

        if phase in configmodule.phases:
            pass
        else:
            raise ValueError('invalid lifecycle phase: ' + repr(phase))

        timeout = self.namespace.get(phase + '_timeout')
        attempts = self.namespace.get(phase + '_attempts')

        return (timeout, attempts)


    # Message construction. These are thin wrappers around openac.protocol
    # so that modules can build messages without importing it directly.

    def config(self, *args):
        return protocol.config(*args)


    def record(self, *args):
        return protocol.record(*args)


    def keepalive(self):
        return protocol.keepalive()


    def flatten(self, message):
        return protocol.flatten(message)


    def classify(self, message):
        return protocol.classify(message)


    def is_config(self, message):
        return protocol.is_config(message)


    def is_record(self, message):
        return protocol.is_record(message)


    def is_keepalive(self, message):
        return protocol.is_keepalive(message)


    # Message delivery.

    def put_config(self, global_config, instance_config, channel=None):
        """ Deliver a CONFIG message carrying the serialized *global_config*
            and *instance_config*. The message goes out on *channel* if
            specified, otherwise on the channel for this handle's role.
        """

        handle = self._require_api()
        message = self.config(global_config, instance_config)
        handle.put_args(self._destination(channel), message)


    def put_record(self, record, channel=None):
        """ Deliver a RECORD message containing the fields of *record*,
            which is a sequence. The message goes out on *channel* if
            specified, otherwise on the channel for this handle's role.
        """

        handle = self._require_api()
        message = self.record(record)
        handle.put_args(self._destination(channel), message)


    def put_keepalive(self, channel=None):
        handle = self._require_api()
        handle.put_args(self._destination(channel), self.keepalive())


    def receive(self, channel=None, timeout=None):
        """ Return the next message arriving on *channel*, or on the channel
            for this handle's role if none is specified. The message is in
            unit form; None is returned if *timeout* seconds pass without
            one.
        """

        handle = self._require_api()
        return handle.get_args(self._destination(channel), timeout)


    def _report(self, format, *args):
        """ Log an error through the API handle, or through the local logger
            if there is no API handle.
        """

        handle = self.api()

        if handle is None:
            logger.error(format, *args)
        else:
            handle.logging('LOG_ERR', format, *args)


# end of class Module



class _Accessor:
    """ A callable standing in for an ``<op>_<name>`` method that a
        :class:`Module` does not define. Calling it performs the operation on
        the module's attribute namespace, or logs the misuse and returns
        None.
    """

    def __init__(self, module, name):

        self.module = module
        self.name = name
        self.op, self.slot = attributes.split(name)


    def __repr__(self):
        return '<accessor %s of %s>' % (self.name, type(self.module).__name__)


    def __call__(self, *args):

        module = self.module
        qualified = type(module).__name__ + '.' + self.name

        if self.op is None:
            module._report('Function %s called by %s is not defined by module API', qualified, _caller())
            return None

        if self.op in attributes.operations:
            pass
        else:
            module._report('Invalid function %s called by %s', qualified, _caller())
            return None

        operation = getattr(module.namespace, self.op)

        try:
            result = operation(self.slot, *args)
        except attributes.UnknownAttribute:
            module._report('Function %s called by %s refers to an undeclared attribute', qualified, _caller())
            return None
        except attributes.WrongKind:
            module._report('Function %s called by %s applies a sequence operation to a scalar attribute', qualified, _caller())
            return None
        except TypeError:
            module._report('Function %s called by %s with invalid arguments %s', qualified, _caller(), repr(args))
            return None

        if self.op in ('get', 'pop', 'shift'):
            return result

        return None


# end of class _Accessor



def _caller():
    """ Describe the code that invoked an accessor: the frame two levels up
        from here, above :func:`_Accessor.__call__`.
    """

    stack = traceback.extract_stack(limit=3)
    frame = stack[0]

    return '%s:%d (%s)' % (frame.filename, frame.lineno, frame.name)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

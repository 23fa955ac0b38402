""" Construction and recognition of OpenAC messages. See the package
    docstring for the distinction between unit form and spread form.
"""

from .fields import CONFIG, RECORD, KEEPALIVE, TAGS


# Field values that count as a single field when they appear as the first
# argument to a constructor. Anything else that is not a list or a tuple
# cannot start a message.

scalar_types = (str, bytes, bytearray, int, float, type(None))


def build(tag, fields=()):
    """ Return the unit form of a message: the bare *tag* if there are no
        *fields*, otherwise a tuple with the *tag* followed by the *fields*.
    """

    if tag in TAGS:
        pass
    else:
        raise ValueError('invalid message tag: ' + repr(tag))

    fields = tuple(fields)

    if len(fields) == 0:
        return tag

    return (tag,) + fields


def flatten(message):
    """ Return the spread form of a unit-form *message*: a flat tuple of the
        tag followed by any fields. An empty tuple is returned if *message*
        is None, which is what the constructors return when they are handed
        something that cannot be a message.
    """

    if message is None:
        return ()

    if isinstance(message, tuple):
        return message

    if isinstance(message, list):
        return tuple(message)

    return (message,)


def classify(message):
    """ Return the tag of *message*, whether it is a bare tag or a full
        message. None is returned if the *message* is not recognizable.
    """

    if isinstance(message, (tuple, list)):
        if len(message) == 0:
            return None
        message = message[0]

    if isinstance(message, str) and message in TAGS:
        return message

    return None


def payload(message):
    """ Return the fields of *message* as a tuple; a bare tag has none.
    """

    spread = flatten(message)
    return tuple(spread[1:])


def _fields(args):
    """ Interpret constructor arguments. A single list or tuple as the first
        argument is the whole field sequence; a scalar as the first argument
        means every argument is a field. None is returned if the arguments
        are neither.
    """

    if len(args) == 0:
        return ()

    first = args[0]

    if isinstance(first, (list, tuple)):
        return tuple(first)

    if isinstance(first, scalar_types):
        return tuple(args)

    return None


def config(*args):
    """ Return a CONFIG message in unit form. The arguments are the
        serialized global configuration and the serialized instance
        configuration, either as two values or as one sequence holding both.
        With no arguments the bare CONFIG tag is returned.
    """

    fields = _fields(args)

    if fields is None:
        return None

    return build(CONFIG, fields)


def record(*args):
    """ Return a RECORD message in unit form. The record fields may be
        passed as a single sequence or as individual arguments; with no
        arguments the bare RECORD tag is returned.
    """

    fields = _fields(args)

    if fields is None:
        return None

    return build(RECORD, fields)


def keepalive():
    """ Return a KEEPALIVE message, which never carries any fields.
    """

    return KEEPALIVE


def is_config(message):
    return message is not None and message == CONFIG


def is_record(message):
    return message is not None and message == RECORD


def is_keepalive(message):
    return message is not None and message == KEEPALIVE


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

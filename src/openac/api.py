""" The API handle for the current process. A module instance uses it for
    two things: moving messages across a channel (:func:`Api.put_args` and
    :func:`Api.get_args`) and reporting problems (:func:`Api.logging`).

    There is exactly one handle per process. The daemon installs it with
    :func:`install` once it knows what kind of process it is; module code
    retrieves it with :func:`get`.
"""

import logging as logmodule

from . import channel
from . import json
from .protocol import fields


class ApiUnavailable(RuntimeError):
    """ No API handle has been installed in this process.
    """



# Syslog style severity names, as accepted by Api.logging().

levels = dict()
levels['LOG_EMERG'] = logmodule.CRITICAL
levels['LOG_ALERT'] = logmodule.CRITICAL
levels['LOG_CRIT'] = logmodule.CRITICAL
levels['LOG_ERR'] = logmodule.ERROR
levels['LOG_WARNING'] = logmodule.WARNING
levels['LOG_NOTICE'] = logmodule.INFO
levels['LOG_INFO'] = logmodule.INFO
levels['LOG_DEBUG'] = logmodule.DEBUG


class Api:
    """ The default API handle. Messages are written to a
        :class:`channel.Channel` as multipart frames: the tag as plain bytes,
        followed by one frame per message field, encoded by
        :func:`json.encode_field`. A bare tag is therefore a single frame.

        The *logger* argument is a :class:`logging.Logger`; the ``openac``
        logger is used if none is specified.
    """

    def __init__(self, logger=None):

        if logger is None:
            logger = logmodule.getLogger('openac')

        self.logger = logger


    def put_args(self, destination, message):
        """ Deliver the unit-form *message* on the channel *destination*.
            Any failure of the channel itself is passed through as-is.
        """

        if destination is None:
            raise channel.ChannelError('no channel to deliver message on')

        if message is None:
            raise ValueError('cannot deliver an empty message')

        if isinstance(message, (tuple, list)):
            tag = message[0]
            values = message[1:]
        else:
            tag = message
            values = ()

        frames = list()
        frames.append(tag.encode())

        for value in values:
            frames.append(json.encode_field(value))

        destination.send(frames)


    def get_args(self, source, timeout=None):
        """ Receive one message from the channel *source* and return it in
            unit form: the bare tag if it has no fields, otherwise a tuple.
            None is returned if *timeout* expires first.
        """

        if source is None:
            raise channel.ChannelError('no channel to receive message from')

        frames = source.recv(timeout)

        if frames is None:
            return None

        tag = frames[0].decode()

        if tag in fields.TAGS:
            pass
        else:
            raise ValueError('unrecognized message tag: ' + repr(tag))

        if len(frames) == 1:
            return tag

        values = list()
        values.append(tag)

        for frame in frames[1:]:
            values.append(json.decode_field(frame))

        return tuple(values)


    def logging(self, level, format, *args):
        """ Log a message. The *level* is a syslog style severity name such
            as 'LOG_ERR'; the *format* is a %-style format string applied to
            *args*. Unrecognized level names are logged as errors.
        """

        try:
            level = levels[level]
        except KeyError:
            level = logmodule.ERROR

        self.logger.log(level, format, *args)


# end of class Api



_api = None


def get():
    """ Return the API handle installed for this process. Raise
        :class:`ApiUnavailable` if there is none.
    """

    if _api is None:
        raise ApiUnavailable('no API handle installed in this process')

    return _api



def install(api=None):
    """ Make *api* the API handle for this process, replacing any previous
        handle. A default :class:`Api` is created if *api* is None. The
        installed handle is returned.
    """

    global _api

    if api is None:
        api = Api()

    _api = api
    return api



def clear():
    """ Remove the API handle for this process, if any.
    """

    global _api
    _api = None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

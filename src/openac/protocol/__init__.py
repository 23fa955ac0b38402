"""
OpenAC Message Protocol
=======================

This package defines the transport-agnostic messages exchanged between the
main process and the child process of each module instance. It MUST NOT
depend on any channel or transport implementation.

A message has two shapes:

Unit form
    What gets handed to a channel writer as one piece. A message without
    fields is just its tag (the *bare tag*); a message with fields is the
    tuple ``(tag, field, field, ...)``.

Spread form
    The flat tuple ``(tag, field, field, ...)`` regardless of whether there
    are any fields, for callers that want to inspect the tag and the fields
    separately. :func:`flatten` converts unit form to spread form.

The ``is_*`` predicates only recognize the bare tag; to classify a full
message compare its first element, or use :func:`classify`.
"""

from . import fields
from .fields import CONFIG, RECORD, KEEPALIVE, TAGS
from .message import build, flatten, classify, payload
from .message import config, record, keepalive
from .message import is_config, is_record, is_keepalive


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

""" Python implementation of the OpenAC module API: the base contract shared
    by every worker module of an OpenAC daemon. This includes the messages
    exchanged between the main process and each module's child process,
    the choice of channel a module instance should use, and the attribute
    namespace shared by all instances of a module class.
"""

# Utility components.

from . import json
from . import config

# Submodules used by multiple other components.

from . import attributes
from . import protocol
from . import channel
from . import api

# Primary public-facing interfaces.

from .module import Module
from .channel import Channel, Main, Child, UNASSIGNED

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

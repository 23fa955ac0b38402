""" Runtime settings for OpenAC modules, most importantly the timeout and
    attempt limits for each phase of a module's lifecycle. These
    limits are enforced by whatever supervises the module processes; here
    they are only loaded into the attribute namespace of a module class.
"""

import os

from . import attributes


phases = ('initialize', 'reinitialize', 'process', 'abort', 'cleanup', 'host')

# Timeouts are in seconds.

defaults = dict()
defaults['initialize_timeout'] = 30
defaults['initialize_attempts'] = 3
defaults['reinitialize_timeout'] = 30
defaults['reinitialize_attempts'] = 3
defaults['process_timeout'] = 300
defaults['process_attempts'] = 1
defaults['abort_timeout'] = 10
defaults['abort_attempts'] = 3
defaults['cleanup_timeout'] = 10
defaults['cleanup_attempts'] = 1
defaults['host_timeout'] = 600
defaults['host_attempts'] = 1


def slots():
    """ Return the slot declarations for the lifecycle settings, suitable
        for use as (part of) the ``slots`` table of a module class.
    """

    declared = dict()

    for name in defaults.keys():
        declared[name] = attributes.SCALAR

    return declared



def setting(name, default=None):
    """ Return the value of the ``OPENAC_<NAME>`` environment variable, or
        *default* if it is not set. Integer and floating point strings are
        converted to numbers; anything else is returned as a string.
    """

    variable = 'OPENAC_' + name.upper()

    try:
        value = os.environ[variable]
    except KeyError:
        return default

    value = value.strip()

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value



def apply(module_class, overrides=None, store=None):
    """ Populate the lifecycle settings for *module_class*: first the
        built-in :data:`defaults`, then any environment overrides, then the
        contents of the *overrides* dictionary, if any. The populated
        :class:`attributes.Namespace` is returned.
    """

    if store is None:
        store = attributes.store

    namespace = store.namespace(module_class)

    for name,value in defaults.items():
        value = setting(name, value)
        namespace.set(name, value)

    if overrides:
        for name,value in overrides.items():
            namespace.set(name, value)

    return namespace


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

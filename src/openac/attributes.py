""" Process-wide named settings shared by every instance of a module class.

    A :class:`Store` holds one :class:`Namespace` per module class; each
    namespace holds a set of named slots. Which slots exist, and whether each
    one holds a scalar or a sequence, is declared by the module classes in
    a ``slots`` table, and inherited by subclasses. Nothing is locked: each
    process is expected to run a single module instance in a single thread
    of control, and every process has its own copy of the store.
"""

SCALAR = 'scalar'
SEQUENCE = 'sequence'

kinds = (SCALAR, SEQUENCE)

operations = ('get', 'set', 'put', 'push', 'pop', 'unshift', 'shift')


class UnknownAttribute(KeyError):
    """ The requested slot name is not declared for the module class.
    """



class WrongKind(TypeError):
    """ A sequence operation was requested on a slot holding a scalar value.
    """



class Namespace:
    """ The slots belonging to a single module class. Slot names are case
        insensitive; they are stored upper-cased.
    """

    def __init__(self, name, declared):

        self.name = name
        self._kinds = dict()
        self._values = dict()

        for slot,kind in declared.items():
            self.declare(slot, kind)


    def __contains__(self, name):
        return normalize(name) in self._kinds


    def __repr__(self):
        return 'attributes.Namespace(%s): %s' % (self.name, repr(self._values))


    def declare(self, name, kind=SCALAR):
        """ Add the slot *name* to this namespace. Declaring a slot that
            already exists leaves its current value alone.
        """

        if kind in kinds:
            pass
        else:
            raise ValueError('invalid slot kind: ' + repr(kind))

        name = normalize(name)
        self._kinds[name] = kind

        if name in self._values:
            return

        if kind == SEQUENCE:
            self._values[name] = list()
        else:
            self._values[name] = None


    def kind(self, name):
        return self._kinds[self._slot(name)]


    def names(self):
        return tuple(self._kinds.keys())


    def _slot(self, name):

        slot = normalize(name)

        if slot in self._kinds:
            return slot

        raise UnknownAttribute("%s has no attribute '%s'" % (self.name, slot))


    def _sequence(self, slot):
        """ Return the list held by *slot*. A slot that has never been given a
            value starts a new empty list; a slot holding a scalar value is
            left alone, and :class:`WrongKind` is raised.
        """

        value = self._values[slot]

        if isinstance(value, list):
            return value

        if value is not None:
            raise WrongKind("%s attribute '%s' holds a scalar value" % (self.name, slot))

        value = list()
        self._values[slot] = value
        return value


    def get(self, name):
        """ Return the value of the slot *name*. A sequence value is returned
            as a copy; changes to it do not affect the slot.
        """

        value = self._values[self._slot(name)]

        if isinstance(value, list):
            return list(value)

        return value


    def set(self, name, value):
        self._values[self._slot(name)] = value


    def put(self, name, *values):
        """ Replace the slot *name* with the sequence of *values*.
        """

        self._values[self._slot(name)] = list(values)


    def push(self, name, value):
        slot = self._slot(name)
        self._sequence(slot).append(value)


    def pop(self, name):
        """ Remove and return the last value in the slot *name*, or None if
            the slot is empty.
        """

        slot = self._slot(name)
        sequence = self._sequence(slot)

        try:
            return sequence.pop()
        except IndexError:
            return None


    def unshift(self, name, value):
        slot = self._slot(name)
        self._sequence(slot).insert(0, value)


    def shift(self, name):
        """ Remove and return the first value in the slot *name*, or None if
            the slot is empty.
        """

        slot = self._slot(name)
        sequence = self._sequence(slot)

        try:
            return sequence.pop(0)
        except IndexError:
            return None


# end of class Namespace



class Store:
    """ All attribute namespaces for this process, keyed by module class.
        Instances of the same class always receive the same
        :class:`Namespace`.
    """

    def __init__(self):
        self._namespaces = dict()


    def __contains__(self, module_class):
        return module_class in self._namespaces


    def __len__(self):
        return len(self._namespaces)


    def clear(self):
        self._namespaces.clear()


    def namespace(self, module_class):
        """ Return the :class:`Namespace` for *module_class*, creating it
            from the class's declared slots if this is the first request.
        """

        try:
            return self._namespaces[module_class]
        except KeyError:
            pass

        name = module_class.__module__ + '.' + module_class.__qualname__
        namespace = Namespace(name, declared(module_class))
        self._namespaces[module_class] = namespace
        return namespace


# end of class Store



def declared(module_class):
    """ Collect the ``slots`` tables of *module_class* and its base classes.
        A subclass may redeclare the kind of an inherited slot.
    """

    collected = dict()

    for cls in reversed(module_class.__mro__):
        try:
            slots = cls.__dict__['slots']
        except KeyError:
            continue

        for name,kind in slots.items():
            collected[normalize(name)] = kind

    return collected



def normalize(name):
    return str(name).upper()



def split(name):
    """ Split an accessor name of the form ``<op>_<slot>`` into the
        operation and the slot name. The operation is everything before the
        first underscore. Returns (None, None) if *name* does not have that
        shape.
    """

    op, separator, slot = name.partition('_')

    if separator == '' or op == '' or slot == '':
        return (None, None)

    return (op, slot)



# The process-wide store used by any module instance not handed a
# different one.

store = Store()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

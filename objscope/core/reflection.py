"""
Reflection facade

The introspection helpers never touch type(), __mro__ or __dict__ directly;
they ask a Reflector. HostReflector answers from the running interpreter,
tests can hand in their own.
"""

from types import ModuleType
from typing import Any, List, Tuple


class Reflector:
    """Interface over the host's reflection primitives."""

    def has_type(self, value: Any) -> bool:
        """Whether value has a constructor to reflect on (False for None)."""
        raise NotImplementedError

    def type_of(self, value: Any) -> type:
        raise NotImplementedError

    def mro(self, cls: type) -> Tuple[type, ...]:
        raise NotImplementedError

    def type_name(self, cls: type) -> str:
        raise NotImplementedError

    def own_keys(self, obj: Any) -> List[Any]:
        """Raw keys stored directly on obj, in storage order."""
        raise NotImplementedError

    def render(self, value: Any) -> str:
        raise NotImplementedError


class HostReflector(Reflector):
    """Reflector backed by the running interpreter."""

    def has_type(self, value: Any) -> bool:
        return value is not None

    def type_of(self, value: Any) -> type:
        return type(value)

    def mro(self, cls: type) -> Tuple[type, ...]:
        return cls.__mro__

    def type_name(self, cls: type) -> str:
        return cls.__name__

    def render(self, value: Any) -> str:
        return str(value)

    def own_keys(self, obj: Any) -> List[Any]:
        # Classes and modules own their namespace
        if isinstance(obj, (type, ModuleType)):
            return list(vars(obj).keys())

        keys = []

        # Plain data objects expose their entries
        if isinstance(obj, dict):
            keys.extend(obj.keys())

        # Sequences (and boxed strings) expose their indices
        elif isinstance(obj, (list, tuple, str)):
            keys.extend(str(index) for index in range(len(obj)))

        # Subclass instances also carry attributes of their own
        instance_dict = _instance_dict(obj)
        if instance_dict is not None:
            keys.extend(instance_dict.keys())

        keys.extend(_populated_slots(obj))
        return keys


def _instance_dict(obj: Any):
    try:
        return object.__getattribute__(obj, '__dict__')
    except AttributeError:
        return None


def _populated_slots(obj: Any) -> List[str]:
    """Slot names with a value set on obj, base classes first."""
    cls = type(obj)
    names = []

    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)

        for slot in slots:
            if slot in ('__dict__', '__weakref__'):
                continue

            # Private slots are stored under their mangled name
            if slot.startswith('__') and not slot.endswith('__'):
                slot = f"_{klass.__name__.lstrip('_')}{slot}"

            descriptor = klass.__dict__.get(slot)
            if descriptor is None or not hasattr(descriptor, '__get__'):
                continue

            try:
                descriptor.__get__(obj, cls)
            except AttributeError:
                continue  # Declared but never assigned

            names.append(slot)

    return names


host_reflector = HostReflector()

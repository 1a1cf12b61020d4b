"""
Turn arbitrary Python values into a stable 32-bit hash and split it into a base color.

The hash must not depend on the interpreter run (so no builtin ``hash``, which is
salted for str/bytes), on dict insertion order or on set iteration order.
"""

import hashlib
import re
import types
from typing import Any, Dict, Optional, Tuple

from .types.color_types import RgbChannels
from .types.format_type import MAX_CHANNEL


_ADDRESS = re.compile(r" at 0x[0-9a-fA-F]+")
_NAMED_TYPES = (type, types.FunctionType, types.BuiltinFunctionType, types.MethodType, types.ModuleType)


def _slot_names(cls: type) -> Tuple[str, ...]:
    names = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__") and s not in names)
    return tuple(names)


def _object_state(value: Any) -> Optional[dict]:
    state = {}
    for name in _slot_names(type(value)):
        try:
            state[name] = getattr(value, name)
        except AttributeError:
            continue
    if hasattr(value, "__dict__"):
        state.update(vars(value))
    elif not state:
        return None
    return state


def _qualified(value: Any) -> str:
    if isinstance(value, types.ModuleType):
        return value.__name__
    if isinstance(value, types.MethodType):
        return f"{_qualified(value.__func__)}@{type(value.__self__).__qualname__}"
    module = getattr(value, "__module__", None) or ""
    return f"{module}.{getattr(value, '__qualname__', value.__name__)}"


def canonical_repr(value: Any, _path: Optional[Dict[int, int]] = None) -> str:
    """
    Deterministic textual form of a value used as the hash input.

    Mappings and sets are ordered by the canonical form of their members, so
    ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}`` hash the same. Objects are
    described by their ``__slots__`` and ``__dict__`` attributes; classes, functions
    and modules by their qualified name. A container that refers back to one of
    its ancestors is written as ``<cycle:N>``, N being the depth of that ancestor.
    """
    if value is None or isinstance(value, (bool, int, float, complex)):
        return f"{type(value).__name__}:{value!r}"
    if isinstance(value, str):
        return f"str:{value!r}"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"bytes:{bytes(value).hex()}"
    if isinstance(value, _NAMED_TYPES):
        return f"{type(value).__name__}:{_qualified(value)}"

    if _path is None:
        _path = {}
    key = id(value)
    if key in _path:
        return f"<cycle:{_path[key]}>"
    _path[key] = len(_path)
    try:
        return _canonical_container(value, _path)
    finally:
        del _path[key]


def _canonical_container(value: Any, path: Dict[int, int]) -> str:
    if isinstance(value, dict):
        items = sorted(f"{canonical_repr(k, path)}={canonical_repr(v, path)}" for k, v in value.items())
        return f"dict{{{','.join(items)}}}"
    if isinstance(value, (set, frozenset)):
        return f"set{{{','.join(sorted(canonical_repr(v, path) for v in value))}}}"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}[{','.join(canonical_repr(v, path) for v in value)}]"

    qualname = f"{type(value).__module__}.{type(value).__qualname__}"
    state = _object_state(value)
    if state is not None:
        return f"{qualname}{canonical_repr(state, path)}"
    # Drop memory addresses from default reprs (``<Foo object at 0x...>``)
    return f"{qualname}:{_ADDRESS.sub('', repr(value))}"


def hash_value(value: Any) -> int:
    """Unsigned 32-bit hash of a value (first four bytes of a SHA-256 digest)."""
    digest = hashlib.sha256(canonical_repr(value).encode("utf-8")).digest()
    return int.from_bytes(digest[:4], byteorder="big")


def channels_from_hash(hash_code: int) -> Tuple[RgbChannels, float]:
    """
    Split a 32-bit hash into base RGB channels and a raw alpha.

    Returns:
        ((red, green, blue), alpha) with alpha taken from the high byte, in [0, 1]
    """
    red = (hash_code & 0xFF0000) >> 16
    green = (hash_code & 0xFF00) >> 8
    blue = hash_code & 0xFF
    alpha = ((hash_code & 0xFF000000) >> 24) / MAX_CHANNEL
    return (red, green, blue), alpha

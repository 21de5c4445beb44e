"""Documentation metadata kept in a reserved slot beside ordinary objects.

The slot is not an attribute or a key of the object. It lives in a side
table keyed by object identity, so it works for objects that cannot take
attributes (like dicts or ints) and can never clash with their own data.
"""

import weakref
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from lambdakit.config import Settings
import lambdakit.logging

_logger = lambdakit.logging.get_logger(__name__)

_Reference = Union['weakref.ref[Any]', Any]

# id(obj) -> (reference to obj, metadata)
_slots: Dict[int, Tuple[_Reference, Dict[str, Any]]] = {}


def _reference_to(obj: object) -> _Reference:
    key = id(obj)
    try:
        return weakref.ref(obj, lambda _: _slots.pop(key, None))
    except TypeError:
        # Not weak-referenceable, so the table keeps the object alive. This
        # also stops its id from being reused while the entry exists.
        return obj


def _dereference(reference: _Reference) -> object:
    if isinstance(reference, weakref.ref):
        return reference()
    return reference


def _lookup(obj: object) -> Optional[Dict[str, Any]]:
    entry = _slots.get(id(obj))
    if entry is None:
        return None
    reference, metadata = entry
    if _dereference(reference) is not obj:
        return None
    return metadata


def get_documentation(obj: object) -> Optional[Dict[str, Any]]:
    """Return a copy of obj's documentation slot, or None if it has none."""
    metadata = _lookup(obj)
    if metadata is None:
        return None
    return dict(metadata)


def set_documentation(obj: object, metadata: Mapping[str, Any]) -> None:
    _slots[id(obj)] = (_reference_to(obj), dict(metadata))


def clear_documentation(obj: object) -> None:
    if _lookup(obj) is not None:
        del _slots[id(obj)]


def attach_documentation(
    source: object,
    target: object,
    extensions: Optional[Mapping[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> None:
    """Copy source's documentation slot onto target, overlaid with extensions.

    Does nothing unless documentation mode is on. When settings is None, the
    mode is read from the environment right now. The merge is shallow: keys
    from extensions replace keys of the same name from source.
    """
    if settings is None:
        settings = Settings.from_environment()
    if not settings.documentation:
        return
    merged = dict(_lookup(source) or {})
    merged.update(extensions or {})
    _logger.debug(
        'attaching documentation keys {} to {!r}', list(merged), target
    )
    set_documentation(target, merged)

"""
Runtime checks of command parameters against a type tag.

A type tag is whatever was passed as `parameter_type` to a typed command:
a class, `Any`, `None`, an `Optional`/`Union`, a parameterised generic such
as `list[int]` (checked against its origin only) or a `Literal`.
"""
import types
from typing import Annotated, Any, Literal, Union, get_args, get_origin

NoneType = type(None)


def _normalize(type_tag: Any) -> Any:
    if type_tag is None:
        return NoneType
    if get_origin(type_tag) is Annotated:
        return _normalize(get_args(type_tag)[0])
    return type_tag


def _is_union(type_tag: Any) -> bool:
    origin = get_origin(type_tag)
    return origin is Union or origin is types.UnionType


def accepts_none(type_tag: Any) -> bool:
    """Return True if `None` is a valid value for `type_tag`."""
    type_tag = _normalize(type_tag)
    if type_tag is Any or type_tag is object or type_tag is NoneType:
        return True
    if _is_union(type_tag):
        return any(accepts_none(arg) for arg in get_args(type_tag))
    if get_origin(type_tag) is Literal:
        return None in get_args(type_tag)
    return False


def is_assignable(value: Any, type_tag: Any) -> bool:
    """
    Return True if `value` may be passed where `type_tag` is expected.

    Subclass instances are accepted. Generic arguments are not inspected:
    any list is assignable to `list[int]`.

    Raises:
        TypeError: If `type_tag` cannot be checked at runtime.
    """
    type_tag = _normalize(type_tag)
    if value is None:
        return accepts_none(type_tag)
    if type_tag is Any or type_tag is object:
        return True
    if _is_union(type_tag):
        return any(is_assignable(value, arg) for arg in get_args(type_tag))

    origin = get_origin(type_tag)
    if origin is Literal:
        # Literal[1] must not match True or 1.0
        return any(type(value) is type(arg) and value == arg for arg in get_args(type_tag))
    if origin is not None:
        type_tag = origin
    return isinstance(value, type_tag)


def ensure_checkable(type_tag: Any) -> None:
    """Raise TypeError early if `type_tag` can't be used with `is_assignable`."""
    try:
        is_assignable(object(), type_tag)
    except TypeError as e:
        raise TypeError(f"Cannot check parameters against {describe(type_tag)} at runtime: {e}") from e


def describe(type_tag: Any) -> str:
    """Readable name of a type tag for messages."""
    if type_tag is None or type_tag is NoneType:
        return "None"
    if isinstance(type_tag, type) and get_origin(type_tag) is None:
        return type_tag.__qualname__
    return repr(type_tag).replace("typing.", "")

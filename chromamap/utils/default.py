from typing import Iterable, Optional, Tuple, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def floats_or_default(values: Optional[Iterable[float]], default: Tuple[float, ...]) -> Tuple[float, ...]:
    """Return ``values`` as a tuple of floats, or the default when omitted."""
    return tuple(float(v) for v in values) if values is not None else default

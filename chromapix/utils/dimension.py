from typing import Any, Tuple
from collections.abc import Sized


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def as_components(element: Any) -> Tuple[Any, ...]:
    """Return a color as a tuple of components; a bare scalar becomes a 1-tuple."""
    if isinstance(element, Sized):
        return tuple(element)
    return (element,)


def from_components(components: Tuple[Any, ...]) -> Any:
    # 1-component colors are bare scalars
    if len(components) == 1:
        return components[0]
    return tuple(components)

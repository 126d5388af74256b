"""Transform Registry - named functions applied to captured values.

Field specs refer to transforms by name. The registry is closed: names are
resolved to functions once, when a rule set is built.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from uaclassify.core.models import SENTINEL


@dataclass(frozen=True)
class TransformFunction:
    """A named transform.

    Attributes:
        name: Name used in field specs
        func: Function applied to a present capture
        accepts_missing: Whether an absent capture is handled (yields the
            sentinel) instead of falling back to the literal token
    """

    name: str
    func: Callable[[str], str]
    accepts_missing: bool = True

    def __call__(self, value: str | None) -> str:
        if value is None:
            return SENTINEL
        return self.func(value)


def _lowerize(value: str) -> str:
    return value.lower()


def _trim(value: str) -> str:
    return value.strip()


TRANSFORMS: Mapping[str, TransformFunction] = MappingProxyType(
    {
        "lowerize": TransformFunction("lowerize", _lowerize),
        "trim": TransformFunction("trim", _trim),
    }
)


def is_transform(token: str, registry: Mapping[str, TransformFunction] = TRANSFORMS) -> bool:
    """Check whether a token names a registered transform."""
    return token in registry


def resolve_transform(
    token: str,
    registry: Mapping[str, TransformFunction] = TRANSFORMS,
) -> TransformFunction:
    """Get the transform registered under a name.

    Raises:
        KeyError: If the name is not registered.
    """
    try:
        return registry[token]
    except KeyError:
        known = ", ".join(sorted(registry))
        raise KeyError(f"Unknown transform '{token}' (registered: {known})") from None


def near_miss(token: str, registry: Mapping[str, TransformFunction] = TRANSFORMS) -> str | None:
    """Find a registered name that differs from the token only by case.

    Returns:
        The registered name, or None if the token is exact or unrelated.
    """
    if token in registry:
        return None
    folded = token.casefold()
    for name in registry:
        if name.casefold() == folded:
            return name
    return None

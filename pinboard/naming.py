"""Human-readable labels for item identifiers."""

import re

_WORD_START = re.compile(r"\B([A-Z])")


def display_name(identifier: str) -> str:
    """Return the label shown for an identifier.

    Takes the last path segment, drops everything from the first dot on,
    and splits camel case into words:

        >>> display_name("Assets/Prefabs/MyCoolItem.prefab")
        'My Cool Item'
    """
    stem = identifier.split("/")[-1].split(".")[0]
    return _WORD_START.sub(r" \1", stem)

import re

_LEADING_DIGIT = re.compile(r"^([0-9])")
_NON_IDENTIFIER = re.compile(r"[^a-zA-Z0-9_]")


def c99ext_identifier(name: str) -> str:
    """
    Convert an arbitrary target label into a C99 extended identifier.

    Args:
        name: The label to sanitize, e.g. ``"Pods-My App"``.

    Returns:
        The identifier, e.g. ``"Pods_My_App"``. A leading digit is prefixed
        with an underscore and every other invalid character is replaced by
        one.
    """
    return _NON_IDENTIFIER.sub("_", _LEADING_DIGIT.sub(r"_\1", name))

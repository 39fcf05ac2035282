"""
Utility functions for the C# builders and the JSON to .NET sample.
"""

import re

# A separator followed by the character to capitalize
_SEPARATOR_PATTERN = re.compile(r"[_-](\w)")


def to_pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case or camelCase text to PascalCase.

    Only the first character and the characters following a separator are
    changed; the rest of the text is kept as is.

    Examples:
        "first_name" -> "FirstName"
        "account-holder" -> "AccountHolder"
        "accountHolder" -> "AccountHolder"
        "userID" -> "UserID"

    Args:
        text: The text to convert

    Returns:
        PascalCase string, or an empty string for blank text
    """
    if not text or not text.strip():
        return ""
    return text[0].upper() + _SEPARATOR_PATTERN.sub(lambda match: match.group(1).upper(), text[1:])

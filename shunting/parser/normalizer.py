"""Input normalization."""


def normalize(expression: str) -> str:
    """Drop all whitespace and lowercase letters; other characters are kept."""
    return "".join(expression.split()).lower()

import re


def trim_to_sentence(text):
    """
    Drop whatever follows the last period and end on a period.

    "a b. c d" -> "a b."
    Text without a period collapses to "." (nothing complete to keep).
    """
    parts = (text or "").split(".")
    return ".".join(parts[:-1]) + "."


def normalize_whitespace(text):
    return re.sub(r"\s+", " ", text or "").strip()

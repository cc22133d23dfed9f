# app/utils/search.py
import re


def sanitize_search_term(term: str) -> str:
    """Escape LIKE wildcards in a user supplied search term"""
    if not isinstance(term, str):
        return ""

    sanitized = re.sub(r"[%_\\]", r"\\\g<0>", term.strip())
    # Limit length
    return sanitized[:100]

# keywords.py
# Keyword set handling and the per-line match test.

DEFAULT_KEYWORDS = ("error", "warning", "failed", "success")


def normalize_keywords(keywords):
    """Lowercase, strip and de-duplicate keywords, keeping first-seen order."""
    seen = []
    for kw in keywords:
        k = kw.strip().lower()
        if not k:
            raise ValueError("keywords must be non-empty strings")
        if k not in seen:
            seen.append(k)
    if not seen:
        raise ValueError("at least one keyword is required")
    return tuple(seen)


def zero_counts(keywords):
    return {k: 0 for k in keywords}


def matches(line, keywords):
    """Return the keywords found in line.

    Matching is a case-insensitive substring test. A keyword that appears
    several times on the same line is reported once.
    """
    lowered = line.lower()
    return {k for k in keywords if k in lowered}

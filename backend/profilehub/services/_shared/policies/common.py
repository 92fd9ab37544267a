from collections.abc import Iterable, Mapping


def normalize_email(raw) -> str:
    """Return the natural account key: trimmed and lowercased."""
    return str(raw or "").strip().lower()


def dedupe_tags(tags: Iterable) -> list[str]:
    """Trim tags, drop blanks and keep the first occurrence of each."""
    seen: set[str] = set()
    out: list[str] = []
    for raw in tags:
        tag = str(raw).strip()
        if tag and tag not in seen:
            seen.add(tag)
            out.append(tag)
    return out


def is_utf8_encodable(value) -> bool:
    """Return ``False`` when any string in ``value`` (nested keys included) has no UTF-8 form."""
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True
    if isinstance(value, Mapping):
        return all(is_utf8_encodable(k) and is_utf8_encodable(v) for k, v in value.items())
    if isinstance(value, list | tuple):
        return all(is_utf8_encodable(item) for item in value)
    return True

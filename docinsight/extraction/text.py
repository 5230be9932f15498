import re

_INLINE_WS = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs inside lines to one space and drop blank lines."""
    lines = (_INLINE_WS.sub(" ", line).strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def join_title(title: str | None, body: str) -> str:
    """Prefix the body with its title line unless the body already starts with it."""
    if not title:
        return body
    if body.split("\n", 1)[0] == title:
        return body
    return f"{title}\n{body}" if body else title

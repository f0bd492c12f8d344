"""Checks for header patterns written in the lint engine's (JavaScript) regex dialect."""

import re

# Group openers Python accepts but a JavaScript RegExp rejects
_PYTHON_ONLY_GROUPS = {
    "(?P": "Python-style named group",
    "(?#": "inline comment",
    "(?>": "atomic group",
    "(?(": "conditional group",
}

_GLOBAL_FLAGS = re.compile(r"\(\?[aiLmsux]+\)")
_BACKREFERENCE = re.compile(r"\\k<([A-Za-z_$][\w$]*)>")


def to_python_pattern(pattern: str) -> str:
    """
    Translate a JavaScript regular expression into Python ``re`` syntax.

    Named groups ``(?<name>...)`` become ``(?P<name>...)`` and named
    backreferences ``\\k<name>`` become ``(?P=name)``. Character classes
    and escapes are copied unchanged.

    Raises:
        re.error: If the pattern uses a construct JavaScript does not support
    """
    out = []
    in_class = False
    i = 0
    while i < len(pattern):
        char = pattern[i]

        if char == "\\":
            backref = None if in_class else _BACKREFERENCE.match(pattern, i)
            if backref:
                out.append(f"(?P={backref.group(1)})")
                i = backref.end()
            else:
                out.append(pattern[i:i + 2])
                i += 2
            continue

        if in_class:
            if char == "]":
                in_class = False
            out.append(char)
            i += 1
            continue

        if char == "[":
            in_class = True
        elif char == "(":
            opener = pattern[i:i + 3]
            if opener in _PYTHON_ONLY_GROUPS:
                raise re.error(f"{_PYTHON_ONLY_GROUPS[opener]} {opener} is not valid in JavaScript", pattern, i)
            if _GLOBAL_FLAGS.match(pattern, i):
                raise re.error("global inline flags are not valid in JavaScript", pattern, i)
            if opener == "(?<" and pattern[i + 3:i + 4] not in ("=", "!"):
                out.append("(?P<")
                i += 3
                continue

        out.append(char)
        i += 1

    return "".join(out)


def capture_group_count(pattern: str) -> int:
    """
    Count the capture groups of a JavaScript regular expression.

    Raises:
        re.error: If the pattern is not valid
    """
    return re.compile(to_python_pattern(pattern)).groups

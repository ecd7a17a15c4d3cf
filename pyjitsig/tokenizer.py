"""
Parameter list tokenizing shared by all signature formats.
"""


def split_parameters(inner: str) -> list[str]:
    """Split the inside of a parameter block on top-level commas.

    Commas inside angle brackets belong to a generic type and do not separate
    parameters: ``Map<String,List<Integer>>,int`` is two parameters. Depth is
    clamped at zero so a stray '>' cannot swallow the rest of the list.
    """
    params = []
    if not inner.strip():
        return params

    depth = 0
    current = []
    for ch in inner:
        if ch == "," and depth == 0:
            params.append("".join(current).strip())
            current = []
            continue
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth = max(depth - 1, 0)
        current.append(ch)

    params.append("".join(current).strip())
    return params


def matching_angle(text: str, open_pos: int) -> int:
    """Return the index of the '>' closing the '<' at open_pos, or -1."""
    depth = 0
    for i in range(open_pos, len(text)):
        ch = text[i]
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
            if depth == 0:
                return i
    return -1


def is_java_identifier_start(ch: str) -> bool:
    return ch == "$" or ch.isidentifier()


def is_java_identifier_part(ch: str) -> bool:
    return ch == "$" or ("_" + ch).isidentifier()


def is_java_identifier(text: str) -> bool:
    if not text or not is_java_identifier_start(text[0]):
        return False
    return all(is_java_identifier_part(ch) for ch in text[1:])


def strip_parameter_name(segment: str) -> str:
    """Drop a declared parameter name ('java.lang.String s' -> 'java.lang.String')."""
    segment = segment.strip()
    last_space = segment.rfind(" ")
    if last_space != -1 and is_java_identifier(segment[last_space + 1:]):
        return segment[:last_space].rstrip()
    return segment

"""
Compact JSON formatter that keeps arrays of scalars on single lines.

A grid row such as ["#FF006E", "#3A86FF", ...] stays on one line, so saved
grid files read like the grid itself.
"""

import json


def _is_scalar(v) -> bool:
    return v is None or isinstance(v, (bool, int, float, str))


def dumps(obj, indent=2):
    """
    Serialize obj to a JSON formatted string.

    Arrays containing only scalars (numbers, strings, booleans, null) are
    kept on a single line. Nested structures are indented normally.

    Args:
        obj: The object to serialize
        indent: Number of spaces for indentation (default: 2)

    Returns:
        A formatted JSON string
    """
    def is_scalar_array(v):
        return isinstance(v, list) and all(_is_scalar(x) for x in v)

    def format_value(v, level):
        pad = " " * (indent * level)
        child_pad = " " * (indent * (level + 1))

        if _is_scalar(v) or is_scalar_array(v):
            return json.dumps(v)

        elif isinstance(v, (list, tuple)):
            if not v:
                return "[]"
            items = [format_value(x, level + 1) for x in v]
            inner = ",\n".join(child_pad + item for item in items)
            return "[\n" + inner + "\n" + pad + "]"

        elif isinstance(v, dict):
            if not v:
                return "{}"
            items = [f"{json.dumps(k)}: {format_value(val, level + 1)}" for k, val in v.items()]
            inner = ",\n".join(child_pad + item for item in items)
            return "{\n" + inner + "\n" + pad + "}"

        else:
            return json.dumps(v)

    return format_value(obj, 0)


def dump(obj, fp, indent=2):
    """
    Serialize obj to a JSON formatted stream.

    Args:
        obj: The object to serialize
        fp: A file-like object with a write() method
        indent: Number of spaces for indentation (default: 2)
    """
    fp.write(dumps(obj, indent))


def load(fp):
    """Wraps json.load."""
    return json.load(fp)

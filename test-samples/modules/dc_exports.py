"""Sample module exporting a subset of its routines.

- foo
"""

__all__ = ["foo", "VERSION"]

VERSION = "1.0"


def foo():
    return "foo"


def bar():
    return "bar"

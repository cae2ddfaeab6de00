"""Sample module with one undocumented routine.

Functions
=========

- foo
- baz(value)
"""


def foo():
    return "foo"


def bar():
    return "bar"


def baz(value):
    return value

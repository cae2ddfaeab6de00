"""Sample module where only ``foo`` is documented.

- foo
"""


def foo():
    return "foo"


def bar():
    return "bar"

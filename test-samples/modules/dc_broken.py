"""Sample module that fails while being imported.

- foo
"""


def foo():
    return "foo"


raise RuntimeError("dc_broken cannot be imported")

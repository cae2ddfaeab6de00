"""Sample package.

Reference
=========

greet(name)
-----------

Returns a greeting.
"""


def greet(name):
    return f"hello {name}"

"""Sample module documenting everything except ``naked``.

Usage
-----

foo
~~~

Returns foo.

bar, baz
~~~~~~~~

Return bar and baz.

Imported helpers
~~~~~~~~~~~~~~~~

* join
* borrowed
* _helper
"""

from os.path import join

from dc_simple import foo as borrowed


def foo():
    return "foo"


def bar():
    return "bar"


def baz():
    return "baz"


def naked():
    return join("a", borrowed())


def _helper():
    return None


class Widget:
    def render(self):
        return "widget"

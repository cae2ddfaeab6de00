"""Sample module without public routines.

- join
"""

from os.path import join

VALUE = join("a", "b")


def _hidden():
    return VALUE

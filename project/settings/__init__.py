# project/settings/__init__.py

"""
Default settings entrypoint.

`project.settings` resolves to the local development configuration.
"""

from .local import *  # noqa

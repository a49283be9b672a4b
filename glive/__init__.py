"""
glive - grml-live build steps for CI jobs.
"""

import logging

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("glive")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Silent until GliveLogger configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

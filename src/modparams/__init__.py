"""modparams: typed name=value parameter parsing.

Callers declare named, typed parameters bound to their own storage, then
parse a command line or configuration string into them.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401

"""optargs - dispatchers for functions and classes with optional arguments."""

__version__ = "0.1.0"

from optargs.markers import opt_args
from optargs.presentation.api.facade import OptArgs

__all__ = ["OptArgs", "__version__", "opt_args"]

"""Python API for optargs.

Example:
    from optargs.presentation.api import OptArgs

    print(OptArgs().generate(source))
"""

from optargs.presentation.api.facade import OptArgs

__all__ = [
    "OptArgs",
]

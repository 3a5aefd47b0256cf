"""Emitters: expansions rendered as Python source."""

from optargs.application.emitters.builder_emitter import BuilderEmitter
from optargs.application.emitters.module_emitter import DEFAULT_HEADER, ModuleEmitter
from optargs.application.emitters.python_emitter import PythonEmitter

__all__ = [
    "DEFAULT_HEADER",
    "BuilderEmitter",
    "ModuleEmitter",
    "PythonEmitter",
]

"""Domain ports (interfaces)."""

from optargs.domain.ports.declaration_parser import DeclarationParserPort
from optargs.domain.ports.reporter import ReporterProtocol

__all__ = [
    "DeclarationParserPort",
    "ReporterProtocol",
]

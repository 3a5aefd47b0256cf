"""Reporters for expansion results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders rich tables.
"""

from optargs.application.reporters._base import BaseReporter
from optargs.application.reporters.console import ConsoleConfig, ConsoleReporter
from optargs.application.reporters.json_reporter import JSONReporter
from optargs.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]

"""
pluglog JSON Transport

Console transport writing one formatted line per record.
"""

import sys
from typing import Any, Optional, TextIO

from pluglog.models.exceptions import ConfigurationError
from pluglog.models.interfaces import ILogFormatter, ILogTransport, LevelLike


class JsonTransport(ILogTransport):
    """
    Transport that formats each record and writes it to a text stream.

    Attributes:
        formatter: Formatter applied to every record
        stream: Output stream; the current ``sys.stdout`` when None
    """

    def __init__(self, formatter: ILogFormatter, stream: Optional[TextIO] = None):
        if formatter is None or not callable(getattr(formatter, "format", None)):
            raise ConfigurationError(
                "A valid formatter must be provided.",
                context={"formatter_type": type(formatter).__name__}
            )
        self.formatter = formatter
        self.stream = stream

    def log(self, level: LevelLike, message: Any, meta: Any = None) -> None:
        message = "undefined" if message is None else str(message)
        formatted_message = self.formatter.format(level, message, meta)
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(formatted_message + "\n")
        stream.flush()

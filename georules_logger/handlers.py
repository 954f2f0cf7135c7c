# =============================================================================
# georules_logger/handlers.py - Tinted Console Handler
# =============================================================================
# Writes each log record as its own tinted block. Every record goes through
# the same three steps, in order:
#
#   1. format the record text
#   2. advance the color scheduler (one new color per record)
#   3. write through the TintingStream (tints with the new color)
# =============================================================================

import logging
from typing import TextIO

from georules_logger.colors import HueScheduler
from georules_logger.stream import TintingStream


class TintedStreamHandler(logging.StreamHandler):
    """
    StreamHandler that gives every record a fresh background color.

    Args:
        downstream: Final destination of the tinted text (defaults to stdout)
        scheduler: Color scheduler (a new one per handler by default)
    """

    # TintingStream terminates every block itself
    terminator = ""

    def __init__(
        self,
        downstream: TextIO | None = None,
        scheduler: HueScheduler | None = None,
    ):
        self.scheduler = scheduler or HueScheduler()
        super().__init__(TintingStream(self.scheduler, downstream))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.scheduler.generate()
            self.stream.write(msg + self.terminator)
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

"""Caption transcript fetcher for publicly hosted YouTube videos."""

import logging

from yt_transcript.transcript_fetcher import *  # noqa: F401,F403
from yt_transcript.transcript_fetcher import __all__

logging.getLogger("yt_transcript").addHandler(logging.NullHandler())

__version__ = "0.1.0"

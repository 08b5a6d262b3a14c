"""Local configuration for amp_timeline."""

from __future__ import annotations

import os


DEFAULT_DOCS_URL = (
    "https://github.com/ampproject/amphtml/blob/master/extensions/"
    "amp-timeline/amp-timeline.md"
)
DEFAULT_HTML_PARSER = "lxml"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "amp-timeline-check/0.1"
DEFAULT_LOG_LEVEL = "WARNING"

# Linked from every schema violation message.
AMP_TIMELINE_DOCS_URL = os.getenv("AMP_TIMELINE_DOCS_URL", DEFAULT_DOCS_URL)
AMP_TIMELINE_HTML_PARSER = os.getenv("AMP_TIMELINE_HTML_PARSER", DEFAULT_HTML_PARSER)
AMP_TIMELINE_FETCH_TIMEOUT_S = float(os.getenv("AMP_TIMELINE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
AMP_TIMELINE_FETCH_MAX_RETRIES = int(os.getenv("AMP_TIMELINE_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
AMP_TIMELINE_FETCH_BACKOFF_S = float(os.getenv("AMP_TIMELINE_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
AMP_TIMELINE_USER_AGENT = os.getenv("AMP_TIMELINE_USER_AGENT", DEFAULT_USER_AGENT)
AMP_TIMELINE_LOG_LEVEL = os.getenv("AMP_TIMELINE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

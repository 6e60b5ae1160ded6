"""Case-insensitive regular expression matching for query patterns."""

import logging
import re

logger = logging.getLogger(__name__)


def regex_matches_ci(pattern: str, text: str) -> bool:
    """Does the pattern match anywhere in the text, ignoring case?

    A pattern that is not a valid regular expression is matched as a
    literal substring instead.
    """
    try:
        return re.search(pattern, text, re.IGNORECASE) is not None
    except re.error as e:
        logger.debug(f"Invalid regex {pattern!r} ({e}), matching literally")
        return re.search(re.escape(pattern), text, re.IGNORECASE) is not None

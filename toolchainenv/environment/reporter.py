"""Write the recommended toolchain version as JSON for the calling pipeline."""

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

logger = logging.getLogger(__name__)


def environment_json(version_to_install: str, key: str = "go") -> Dict[str, Any]:
    """
    Build the environment object for a recommendation.

    Example:
        >>> environment_json("")
        {'go': {}}
        >>> environment_json("1.21")
        {'go': {'version': '1.21'}}
    """
    if not version_to_install:
        return {key: {}}
    return {key: {"version": version_to_install}}


def report(
    version_to_install: str, stream: Optional[TextIO] = None, key: str = "go"
) -> bool:
    """
    Write the environment JSON to ``stream`` (stdout by default).

    Write failures are logged and not raised; the recommendation has
    already been decided at this point.

    Returns:
        True if the output was written and flushed
    """
    if stream is None:
        stream = sys.stdout
    content = json.dumps(environment_json(version_to_install, key))

    try:
        stream.write(content)
        stream.flush()
        return True
    except (OSError, ValueError) as e:
        logger.error(f"Failed to write environment json to stdout: {e}")
        return False


__all__ = ["environment_json", "report"]

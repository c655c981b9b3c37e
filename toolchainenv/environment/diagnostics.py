"""
Diagnostics emitted by the environment decision.

Every branch of the decision table has its own :class:`DiagnosticCode`.
The message and code of a decision are forwarded to a
:class:`DiagnosticsSink` exactly once. Sinks own their failures: an error
while recording a diagnostic is logged by the sink and never reaches the
decision procedure.
"""

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import List, Tuple

logger = logging.getLogger(__name__)


class DiagnosticCode(Enum):
    """Closed set of decision outcomes."""

    NO_MANIFEST_AND_NO_ENV = "no-manifest-and-no-env"
    NO_MANIFEST_AND_ENV_BELOW_RANGE = "no-manifest-and-env-below-range"
    NO_MANIFEST_AND_ENV_ABOVE_RANGE = "no-manifest-and-env-above-range"
    NO_MANIFEST_AND_ENV_SUPPORTED = "no-manifest-and-env-supported"
    MANIFEST_TOO_HIGH_AND_NO_ENV = "manifest-too-high-and-no-env"
    MANIFEST_TOO_HIGH_AND_ENV_TOO_HIGH = "manifest-too-high-and-env-too-high"
    MANIFEST_TOO_HIGH_AND_ENV_TOO_LOW = "manifest-too-high-and-env-too-low"
    MANIFEST_TOO_HIGH_AND_ENV_BELOW_MAX = "manifest-too-high-and-env-below-max"
    MANIFEST_TOO_HIGH_AND_ENV_AT_MAX = "manifest-too-high-and-env-at-max"
    MANIFEST_TOO_LOW_AND_NO_ENV = "manifest-too-low-and-no-env"
    MANIFEST_TOO_LOW_AND_ENV_UNSUPPORTED = "manifest-too-low-and-env-unsupported"
    MANIFEST_TOO_LOW_AND_ENV_SUPPORTED = "manifest-too-low-and-env-supported"
    MANIFEST_SUPPORTED_AND_NO_ENV = "manifest-supported-and-no-env"
    MANIFEST_SUPPORTED_AND_ENV_UNSUPPORTED = "manifest-supported-and-env-unsupported"
    MANIFEST_SUPPORTED_AND_ENV_LOWER = "manifest-supported-and-env-lower"
    MANIFEST_SUPPORTED_AND_ENV_HIGHER_OR_EQUAL = (
        "manifest-supported-and-env-higher-or-equal"
    )

    @property
    def title(self) -> str:
        """Readable name, e.g. ``Manifest too high and env at max``."""
        return self.name.replace("_", " ").capitalize()


class DiagnosticsSink(ABC):
    """Destination for decision diagnostics."""

    @abstractmethod
    def emit(self, message: str, code: DiagnosticCode) -> None:
        """Record one diagnostic. Must not raise."""
        pass


class NullDiagnosticsSink(DiagnosticsSink):
    """Sink that discards every diagnostic."""

    def emit(self, message: str, code: DiagnosticCode) -> None:
        pass


class LoggingDiagnosticsSink(DiagnosticsSink):
    """Sink that writes diagnostics to a logger."""

    def __init__(self, log: logging.Logger = logger, level: int = logging.INFO):
        self.log = log
        self.level = level

    def emit(self, message: str, code: DiagnosticCode) -> None:
        self.log.log(self.level, f"[{code.value}] {message}")


class RecordingDiagnosticsSink(DiagnosticsSink):
    """Sink that keeps every diagnostic in memory, in emission order."""

    def __init__(self):
        self.records: List[Tuple[str, DiagnosticCode]] = []

    def emit(self, message: str, code: DiagnosticCode) -> None:
        self.records.append((message, code))

    @property
    def codes(self) -> List[DiagnosticCode]:
        return [code for _, code in self.records]


class JsonFileDiagnosticsSink(DiagnosticsSink):
    """
    Sink writing one JSON file per diagnostic into a directory.

    The file layout follows the diagnostics format read by CI tooling::

        {
          "timestamp": "2023-08-01T12:00:00.000000+00:00",
          "source": {"id": "go/autobuilder/...", "name": "...",
                     "extractorName": "go"},
          "markdownMessage": "...",
          "severity": "note",
          "visibility": {"statusPage": false, "cliSummaryTable": false,
                         "telemetry": true}
        }

    Args:
        directory: Directory receiving the diagnostic files (created on demand)
        source_prefix: Prefix of ``source.id``, usually the toolchain key
    """

    def __init__(self, directory: Path, source_prefix: str = "go"):
        self.directory = Path(directory)
        self.source_prefix = source_prefix
        self._count = 0

    def emit(self, message: str, code: DiagnosticCode) -> None:
        now = datetime.now(timezone.utc)
        payload = {
            "timestamp": now.isoformat(),
            "source": {
                "id": f"{self.source_prefix}/autobuilder/env-{code.value}",
                "name": code.title,
                "extractorName": self.source_prefix,
            },
            "markdownMessage": message,
            "severity": "note",
            "visibility": {
                "statusPage": False,
                "cliSummaryTable": False,
                "telemetry": True,
            },
        }

        self._count += 1
        filename = f"autobuilder-{now.strftime('%Y%m%d%H%M%S%f')}-{self._count}.json"
        path = self.directory / filename

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            logger.debug(f"Wrote diagnostic {code.value} to {path}")
        except OSError as e:
            logger.warning(f"Failed to write diagnostic {code.value} to {path}: {e}")


__all__ = [
    "DiagnosticCode",
    "DiagnosticsSink",
    "JsonFileDiagnosticsSink",
    "LoggingDiagnosticsSink",
    "NullDiagnosticsSink",
    "RecordingDiagnosticsSink",
]

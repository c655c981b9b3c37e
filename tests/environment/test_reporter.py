"""
Tests for the environment JSON reporter.
"""

import io
import json
import logging
from unittest.mock import Mock

from toolchainenv.environment.reporter import environment_json, report


class TestEnvironmentJson:
    """Test environment_json()."""

    def test_empty_version(self):
        """Test no action serializes as an empty inner object."""
        assert environment_json("") == {"go": {}}

    def test_version(self):
        """Test a version is nested under 'version'."""
        assert environment_json("1.21") == {"go": {"version": "1.21"}}

    def test_custom_key(self):
        """Test the toolchain key is configurable."""
        assert environment_json("1.2", key="zig") == {"zig": {"version": "1.2"}}


class TestReport:
    """Test report()."""

    def test_report_empty(self):
        """Test empty recommendation output."""
        stream = io.StringIO()

        assert report("", stream=stream) is True
        assert json.loads(stream.getvalue()) == {"go": {}}

    def test_report_version(self):
        """Test recommendation output with a version."""
        stream = io.StringIO()

        report("1.18", stream=stream)

        assert json.loads(stream.getvalue()) == {"go": {"version": "1.18"}}

    def test_report_defaults_to_stdout(self, capsys):
        """Test stdout is used when no stream is given."""
        report("1.21")

        assert json.loads(capsys.readouterr().out) == {"go": {"version": "1.21"}}

    def test_write_failure_is_logged(self, caplog):
        """Test write errors are logged, not raised."""
        stream = Mock()
        stream.write.side_effect = OSError("broken pipe")

        with caplog.at_level(logging.ERROR):
            assert report("1.21", stream=stream) is False

        assert "Failed to write environment json" in caplog.text

    def test_closed_stream_is_logged(self, caplog):
        """Test writing to a closed stream is logged, not raised."""
        stream = io.StringIO()
        stream.close()

        with caplog.at_level(logging.ERROR):
            assert report("", stream=stream) is False

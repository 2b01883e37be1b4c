"""Testing support – fakes for exercising code built on the retrying client.

Usage::

    from resilient_http.testing import RecordingSleep, ScriptedTransport
"""

from resilient_http.testing.fakes import LogRecord, RecordingLogger, RecordingSleep, ScriptedTransport

__all__ = ["LogRecord", "RecordingLogger", "RecordingSleep", "ScriptedTransport"]

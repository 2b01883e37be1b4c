"""Testing fakes – in-memory doubles for the transport, logger and timer ports."""
from resilient_http.testing.fakes.logger import LogRecord, RecordingLogger
from resilient_http.testing.fakes.sleep import RecordingSleep
from resilient_http.testing.fakes.transport import ScriptedTransport

__all__ = ["LogRecord", "RecordingLogger", "RecordingSleep", "ScriptedTransport"]

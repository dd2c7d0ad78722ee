from .config import (
    LoggingConfig as LoggingConfig,
    StreamType as StreamType,
)
from .console_sink import ConsoleSink as ConsoleSink
from .models import (
    Entry as Entry,
    LogLevel as LogLevel,
)
from .readiness_logger import (
    LogSink as LogSink,
    ReadinessLogger as ReadinessLogger,
)

from idgen.timebase import Timebase, TimeSource
from idgen.quickid import QuickId, ParsedId, parse_id, SEQ_LIMIT
from idgen.default import SerializedGenerator, configure_default, get_default_generator, generate_id

__all__ = [
    "Timebase",
    "TimeSource",
    "QuickId",
    "ParsedId",
    "parse_id",
    "SEQ_LIMIT",
    "SerializedGenerator",
    "configure_default",
    "get_default_generator",
    "generate_id",
]

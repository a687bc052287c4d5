"""
QuickId - time-ordered, lexicographically sortable unique IDs.

Format: 9 base-32 chars of epoch milliseconds + system tag + 4 base-32 chars
of sequence. IDs from one generator sort in generation order.
"""

from core.errors import ConfigurationError, MalformedIdError
from idgen.timebase import Timebase, TimeSource
from internal.logging import get_logger
from utils.base32 import decode_base32, encode_base32

TIME_WIDTH = 9
SEQ_WIDTH = 4
SEQ_LIMIT = 32 ** SEQ_WIDTH
MIN_ID_LENGTH = TIME_WIDTH + SEQ_WIDTH


class ParsedId:
    __slots__ = ("time", "sys", "seq")

    def __init__(self, time, sys, seq):
        self.time = time
        self.sys = sys
        self.seq = seq

    def __eq__(self, other):
        if not isinstance(other, ParsedId):
            return NotImplemented
        return (self.time, self.sys, self.seq) == (other.time, other.sys, other.seq)

    def __hash__(self):
        return hash((self.time, self.sys, self.seq))

    def __repr__(self):
        return f"ParsedId(time={self.time}, sys={self.sys!r}, seq={self.seq})"

    def to_dict(self):
        return {"time": self.time, "sys": self.sys, "seq": self.seq}


def parse_id(id):
    """Split an ID into its time, system tag and sequence fields.

    Slicing is structural: the first 9 and last 4 characters are the numeric
    fields, whatever sits between them is the tag.
    """
    if not isinstance(id, str):
        raise MalformedIdError(f"id must be a string, got {type(id).__name__}", value=id)
    if len(id) < MIN_ID_LENGTH:
        raise MalformedIdError(f"id shorter than {MIN_ID_LENGTH} chars: {id!r}", value=id)

    try:
        time = decode_base32(id[:TIME_WIDTH])
        seq = decode_base32(id[-SEQ_WIDTH:])
    except ValueError as exc:
        raise MalformedIdError(f"id has invalid digits: {id!r}", value=id, cause=exc) from exc

    return ParsedId(time, id[TIME_WIDTH:-SEQ_WIDTH], seq)


class QuickId:
    """Generates IDs for one system tag. Not thread-safe; see SerializedGenerator."""

    def __init__(self, system_tag="", timebase: TimeSource | None = None):
        if not isinstance(system_tag, str):
            raise ConfigurationError(f"system_tag must be a string, got {type(system_tag).__name__}",
                                     key="system_tag")
        self._system_tag = system_tag
        self._timebase = timebase or Timebase()
        self._sequence = 0
        self.rollovers = 0
        self._log = get_logger()

    @classmethod
    def with_shared_timebase(cls, timebase, system_tag=""):
        """Generator on a caller-owned timebase; every sharer must hold the same lock."""
        return cls(system_tag, timebase=timebase)

    @property
    def system_tag(self):
        return self._system_tag

    @property
    def timebase(self):
        return self._timebase

    @property
    def sequence(self):
        """Sequence value used by the most recent ID."""
        return self._sequence

    def get_id(self):
        self._sequence += 1
        if self._sequence == SEQ_LIMIT:
            # Sequence restarts lower, so the time field has to move forward
            self._sequence = 0
            self.rollovers += 1
            time = self._timebase.advance_past()
            self._log.debug("sequence rollover", sys=self._system_tag, time=time)
        else:
            time = self._timebase.get_newer_timestamp(0)

        return encode_base32(time, TIME_WIDTH) + self._system_tag + encode_base32(self._sequence, SEQ_WIDTH)

    def parse_id(self, id):
        return parse_id(id)

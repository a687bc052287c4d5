"""Lock-guarded generator and the process-wide default instance."""

import threading

from config import load_config
from idgen.quickid import QuickId, parse_id

_default = None
_default_lock = threading.Lock()


class SerializedGenerator:
    """Serializes access to one QuickId so it can be shared across threads."""

    def __init__(self, generator):
        self.generator = generator
        self._lock = threading.Lock()
        self.issued = 0

    @property
    def system_tag(self):
        return self.generator.system_tag

    def get_id(self):
        with self._lock:
            self.issued += 1
            return self.generator.get_id()

    def get_ids(self, count):
        """Issue `count` IDs as one contiguous, ordered batch."""
        with self._lock:
            ids = [self.generator.get_id() for _ in range(count)]
            self.issued += count
            return ids

    def current_timestamp(self):
        with self._lock:
            return self.generator.timebase.current_timestamp()

    def parse_id(self, id):
        return parse_id(id)

    def get_stats(self):
        return {
            "system_tag": self.generator.system_tag,
            "issued": self.issued,
            "rollovers": self.generator.rollovers,
        }


def configure_default(system_tag=""):
    """Replace the process-wide generator."""
    global _default
    with _default_lock:
        _default = SerializedGenerator(QuickId(system_tag))
    return _default


def get_default_generator():
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = SerializedGenerator(QuickId(load_config().generator.system_tag))
    return _default


def generate_id():
    """One ID from the process-wide generator."""
    return get_default_generator().get_id()

import logging
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Optional, Tuple

from .models import Call, Transcript
from .parser import parse_record

logger = logging.getLogger(__name__)

class CallStore:
    """Read-only index of the calls in one batch, keyed by call id.

    Built once and passed explicitly to whoever needs call metadata; it is
    never mutated afterwards, so any number of workers may read it.
    """

    def __init__(self, pairs: Iterable[Tuple[Call, Transcript]]):
        calls = {}
        transcripts = {}
        self.duplicates = 0
        for call, transcript in pairs:
            if call.call_id in calls:
                self.duplicates += 1
                logger.warning("duplicate call id %s ignored", call.call_id)
                continue
            calls[call.call_id] = call
            transcripts[call.call_id] = transcript
        self._calls = MappingProxyType(calls)
        self._transcripts = MappingProxyType(transcripts)

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "CallStore":
        return cls(parse_record(r, i) for i, r in enumerate(records))

    def __len__(self) -> int:
        return len(self._calls)

    def __iter__(self) -> Iterator[Tuple[Call, Transcript]]:
        for call_id, call in self._calls.items():
            yield call, self._transcripts[call_id]

    def __contains__(self, call_id: str) -> bool:
        return call_id in self._calls

    def call(self, call_id: str) -> Optional[Call]:
        return self._calls.get(call_id)

    def transcript(self, call_id: str) -> Optional[Transcript]:
        return self._transcripts.get(call_id)

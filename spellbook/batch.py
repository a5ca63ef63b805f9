from dataclasses import dataclass, field
from typing import Iterable, List

from .errors import ConversionError, EntryConversionError
from .features import Converted, normalize
from .models import RawEntry

ABORT = "abort"
SKIP = "skip"
POLICIES = (ABORT, SKIP)

@dataclass
class Failure:
    index: int
    name: str
    error: ConversionError

@dataclass
class BatchResult:
    converted: List[Converted] = field(default_factory=list)
    failures: List[Failure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

def convert_all(entries: Iterable[RawEntry], on_error: str = ABORT, strict_components: bool = False) -> BatchResult:
    """
    Normalize every entry in order.

    on_error="abort" stops at the first bad entry (EntryConversionError),
    on_error="skip" records a Failure and carries on.
    """
    if on_error not in POLICIES:
        raise ValueError(f"on_error must be one of {POLICIES}, got {on_error!r}")

    result = BatchResult()
    for i, entry in enumerate(entries):
        try:
            result.converted.append(normalize(entry, strict_components=strict_components))
        except ConversionError as e:
            if on_error == ABORT:
                raise EntryConversionError(i, entry.name, e) from e
            result.failures.append(Failure(i, entry.name, e))
    return result

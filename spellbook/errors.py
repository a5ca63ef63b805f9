from typing import List

class ConversionError(ValueError):
    """Base for anything that stops one entry from being normalized."""

class UnknownSchool(ConversionError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown school code: {code!r}")

class UnknownClass(ConversionError):
    def __init__(self, names: List[str], raw: str = ""):
        self.names = list(names)
        self.raw = raw
        super().__init__(f"Unknown class(es) {self.names} in {raw!r}")

class MalformedComponents(ConversionError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Material description not closed by ')': {raw!r}")

class EntryConversionError(ConversionError):
    """Raised by batch conversion when the policy is to abort."""
    def __init__(self, index: int, entry_name: str, error: ConversionError):
        self.index = index
        self.entry_name = entry_name
        self.error = error
        super().__init__(f"Entry #{index} ({entry_name!r}): {error}")

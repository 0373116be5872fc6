# twashell/models/launch_uri.py
import re
from dataclasses import dataclass

SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


@dataclass(frozen=True)
class LaunchUri:
    value: str                # total string form, e.g. 'web+tea://green'

    @classmethod
    def parse(cls, text: str) -> "LaunchUri":
        return cls(text.strip())

    @property
    def scheme(self) -> str:
        """Scheme as written (case preserved), or '' when there is none."""
        m = SCHEME_PATTERN.match(self.value)
        if m:
            return m.group(1)
        return ""

    def __str__(self) -> str:
        return self.value

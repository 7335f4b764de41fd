from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import date

from ..core.constants import DEFAULT_SESSION_CODE_SUFFIX_LENGTH, SESSION_CODE_ALPHABET


@dataclass(frozen=True)
class SessionCodeGenerator:
    """Builds ``{courseCode}-{YYYYMMDD}-{suffix}`` codes.

    The suffix is meant to be typed or scanned by students, so it stays short;
    uniqueness is enforced by the store, not here.
    """

    suffix_length: int = DEFAULT_SESSION_CODE_SUFFIX_LENGTH
    alphabet: str = SESSION_CODE_ALPHABET

    def __post_init__(self):
        if self.suffix_length < 1:
            raise ValueError("suffix_length must be positive")

    def random_suffix(self) -> str:
        return "".join(secrets.choice(self.alphabet) for _ in range(self.suffix_length))

    def generate(self, course_code: str, session_date: date) -> str:
        return f"{course_code}-{session_date.strftime('%Y%m%d')}-{self.random_suffix()}"

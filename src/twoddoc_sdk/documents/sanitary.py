"""
Sanitary (laboratory test result) document body
"""

from dataclasses import dataclass
from typing import ClassVar, List

from ..parsing.body import ALNUM, DIGITS, LETTERS, BodyField
from ..parsing.dates import decode_ascii_date, decode_ascii_datetime

GENDERS = {'M': 'male', 'F': 'female', 'U': 'unknown'}

ANALYSIS_RESULTS = {
    'P': 'positive',
    'N': 'negative',
    'I': 'undetermined',
    'X': 'non-compliant sample',
}


@dataclass(frozen=True)
class SanitaryBody:
    """Patient identity and analysis result of a sanitary certificate"""

    DOCUMENT_KIND: ClassVar[str] = "sanitary"
    FIELDS: ClassVar[List[BodyField]] = [
        BodyField("F0", "lastname", LETTERS, 0, 60),
        BodyField("F1", "firstname", LETTERS, 0, 38),
        BodyField("F2", "birthdate", DIGITS, 8, 8, decode_ascii_date),
        BodyField("F3", "gender", "MFU", 1, 1),
        BodyField("F4", "analysis_code", ALNUM, 3, 7),
        BodyField("F5", "analysis_result", "PNIX", 1, 1),
        BodyField("F6", "analysis_datetime", DIGITS, 12, 12, decode_ascii_datetime),
    ]

    lastname: str
    firstname: str
    birthdate: str
    gender: str
    analysis_code: str
    analysis_result: str
    analysis_datetime: str

    @property
    def gender_label(self) -> str:
        return GENDERS[self.gender.upper()]

    @property
    def analysis_result_label(self) -> str:
        return ANALYSIS_RESULTS[self.analysis_result.upper()]

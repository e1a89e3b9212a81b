"""
Vaccination document body
"""

from dataclasses import dataclass
from typing import ClassVar, List

from ..parsing.body import ALNUM, DIGITS, LETTERS, UPPER, BodyField
from ..parsing.dates import decode_ascii_date


@dataclass(frozen=True)
class VaccinationBody:
    """Patient identity and vaccination cycle of a vaccination certificate"""

    DOCUMENT_KIND: ClassVar[str] = "vaccination"
    FIELDS: ClassVar[List[BodyField]] = [
        BodyField("L0", "lastname", LETTERS, 0, 80),
        BodyField("L1", "firstname", LETTERS, 0, 80),
        # Lunar birthdates are allowed upstream and kept as plain text here
        BodyField("L2", "birthdate", DIGITS, 8, 8, decode_ascii_date),
        BodyField("L3", "disease", ALNUM, 0, 30),
        BodyField("L4", "preventive_agent", ALNUM, 5, 15),
        BodyField("L5", "vaccine", ALNUM, 5, 30),
        BodyField("L6", "vaccine_maker", ALNUM, 5, 30),
        BodyField("L7", "doses_taken", DIGITS, 1, 1),
        BodyField("L8", "doses_expected", DIGITS, 1, 1),
        BodyField("L9", "last_dose_date", DIGITS, 8, 8, decode_ascii_date),
        BodyField("LA", "cycle_state", UPPER, 2, 2),
    ]

    lastname: str
    firstname: str
    birthdate: str
    disease: str
    preventive_agent: str
    vaccine: str
    vaccine_maker: str
    doses_taken: str
    doses_expected: str
    last_dose_date: str
    cycle_state: str

    @property
    def is_cycle_complete(self) -> bool:
        """Whether every expected dose has been taken"""
        return int(self.doses_taken) >= int(self.doses_expected)

"""Parser for the Darwin Core ``basisOfRecord`` term."""

from __future__ import annotations

from enum import StrEnum

from .dictionary import DictionaryParser

RESOURCE_NAME = "basis_of_record.txt"


class BasisOfRecord(StrEnum):
    PRESERVED_SPECIMEN = "PRESERVED_SPECIMEN"
    FOSSIL_SPECIMEN = "FOSSIL_SPECIMEN"
    LIVING_SPECIMEN = "LIVING_SPECIMEN"
    OBSERVATION = "OBSERVATION"
    HUMAN_OBSERVATION = "HUMAN_OBSERVATION"
    MACHINE_OBSERVATION = "MACHINE_OBSERVATION"
    MATERIAL_SAMPLE = "MATERIAL_SAMPLE"
    MATERIAL_CITATION = "MATERIAL_CITATION"
    LITERATURE = "LITERATURE"
    OCCURRENCE = "OCCURRENCE"
    UNKNOWN = "UNKNOWN"


class BasisOfRecordParser(DictionaryParser[BasisOfRecord]):
    """Case-insensitive lookup backed by ``resources/basis_of_record.txt``."""

    @classmethod
    def load(cls) -> BasisOfRecordParser:
        return cls.from_resource(RESOURCE_NAME, BasisOfRecord)

"""
Document types supported by the 2D-DOC SDK

The caller always picks the document type; the header's document type ID is
never used to dispatch automatically.
"""

from typing import Dict, List, Type, Union

from ..exceptions import UnknownDocumentType
from .sanitary import SanitaryBody, GENDERS, ANALYSIS_RESULTS
from .vaccination import VaccinationBody

DocumentBody = Union[SanitaryBody, VaccinationBody]

DOCUMENT_TYPES: Dict[str, Type] = {
    SanitaryBody.DOCUMENT_KIND: SanitaryBody,
    VaccinationBody.DOCUMENT_KIND: VaccinationBody,
}


def get_document_type(name: str) -> Type:
    """
    Look up a body type by name.

    Raises:
        UnknownDocumentType: If no document type is registered under ``name``
    """
    body_type = DOCUMENT_TYPES.get(name.lower())
    if body_type is None:
        raise UnknownDocumentType(
            f"Unknown document type '{name}'",
            details={'available': get_available_document_types()}
        )
    return body_type


def get_available_document_types() -> List[str]:
    return sorted(DOCUMENT_TYPES)


__all__ = [
    'SanitaryBody',
    'VaccinationBody',
    'DocumentBody',
    'DOCUMENT_TYPES',
    'GENDERS',
    'ANALYSIS_RESULTS',
    'get_document_type',
    'get_available_document_types',
]

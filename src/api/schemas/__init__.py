from .guidance import (
    PreferencesSchema,
    GuidanceRequest,
    GuidanceResponse,
    SelectionValidationResponse,
    CategoryInfoResponse,
    FormatValidateRequest,
    FormatValidateResponse,
)

__all__ = [
    "PreferencesSchema",
    "GuidanceRequest",
    "GuidanceResponse",
    "SelectionValidationResponse",
    "CategoryInfoResponse",
    "FormatValidateRequest",
    "FormatValidateResponse",
]

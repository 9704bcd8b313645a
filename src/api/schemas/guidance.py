from pydantic import BaseModel, Field
from typing import Optional


class PreferencesSchema(BaseModel):
    """Optional user preferences, checked by the menu service."""

    spice_level: Optional[str] = Field(default=None, description="low, medium, high or extreme")
    dietary: Optional[str] = Field(default=None, description="veg, non-veg or any")
    formality: Optional[str] = Field(default=None, description="formal or informal")
    region: Optional[str] = Field(default=None, description="coastal, guntur or rayalaseema")
    time_of_day: Optional[str] = Field(
        default=None,
        description="morning, afternoon, evening or night, inferred from the clock when omitted"
    )


class GuidanceRequest(BaseModel):
    """Dropdown selection sent by the client."""

    category: str = Field(..., description="slang, food, festival or emotion")
    selection: str = Field(..., description="Term, city, festival or mood")
    preferences: Optional[PreferencesSchema] = None


class GuidanceResponse(BaseModel):
    """Formatted cultural guidance."""

    request_id: str
    response: str
    category: str
    selection: str
    preferences: Optional[PreferencesSchema] = None


class SelectionValidationResponse(BaseModel):
    """Outcome of validating a selection without generating guidance."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class CategoryInfoResponse(BaseModel):
    category: str
    description: str
    subcategories: list[str]
    available_preferences: list[str]


class FormatValidateRequest(BaseModel):
    content: str = Field(..., description="Text to check against the output policy")


class FormatValidateResponse(BaseModel):
    """Output policy check with a fix-up suggestion per issue."""

    is_valid: bool
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

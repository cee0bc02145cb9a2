"""Working-hours config validation endpoint."""

from fastapi import APIRouter

from ..domain.schemas import ConfigForm, ValidationResponse
from ..engine import validate_config

router = APIRouter(prefix="/configs", tags=["configs"])


@router.post("/validate", response_model=ValidationResponse)
def validate(form: ConfigForm) -> ValidationResponse:
    """Return every field error of a config form; invalid is still a 200."""
    result = validate_config(form.model_dump())
    return ValidationResponse(valid=result.valid, errors=result.errors)

# app/schemas/validation.py
from pydantic import BaseModel, Field
from typing import List


class ValidationResult(BaseModel):
    valid: bool = True
    errors: List[str] = Field(default_factory=list)

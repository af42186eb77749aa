from pydantic import BaseModel, Field


class BaseRecord(BaseModel):
    """Base record class with a string identifier shared by all recipe sources"""
    id: str = Field(..., description="Stable unique identifier")

    model_config = {
        "validate_assignment": True,
        "populate_by_name": True,
        "extra": "forbid",
        "json_schema_extra": {
            "example": {
                "id": "1"
            }
        }
    }

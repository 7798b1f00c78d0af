from typing import Any, Dict

from pydantic import BaseModel, Field


class SentenceCheckRequest(BaseModel):
    # values are coerced by the normalizer, so anything JSON can carry is accepted
    sentences: Dict[str, Any] = Field(description="Exercise id -> submitted sentence")

    model_config = {
        "json_schema_extra": {
            "example": {
                "sentences": {
                    "s1": "I stayed home because it was raining heavily outside today.",
                    "s2": "Although it was late, we kept talking for hours.",
                    "s3": "If I had more time, I would travel the whole world.",
                }
            }
        }
    }

from typing import Dict

from pydantic import BaseModel, Field


class ReviewAggregate(BaseModel):
    """An approved review, reduced to the fields rating statistics need"""
    rating: int = Field(..., ge=1, le=5)
    is_verified_purchase: bool = False
    is_recommended: bool = True


def empty_distribution() -> Dict[int, int]:
    """Helper function for Pydantic default_factory: zero count per star"""
    return {star: 0 for star in range(1, 6)}


class RatingAggregate(BaseModel):
    """Rating statistics over a product's approved reviews"""
    average: float = 0.0
    count: int = 0
    distribution: Dict[int, int] = Field(default_factory=empty_distribution)
    verified_pct: float = 0.0
    recommended_pct: float = 0.0

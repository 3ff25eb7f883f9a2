"""
Services package for product detail read models.
"""

from src.services.derived_attribute_calculator import DerivedAttributeCalculator
from src.services.media_url_resolver import MediaUrlResolver
from src.services.pricing_engine import PricingEngine
from src.services.snapshot_assembler import SnapshotAssembler

__all__ = [
    "DerivedAttributeCalculator",
    "MediaUrlResolver",
    "PricingEngine",
    "SnapshotAssembler",
]

"""Shared test fixtures"""
import pytest
from datetime import datetime, timedelta, UTC

from src.models.product import ProductAggregate
from src.services.media_url_resolver import MediaUrlResolver
from src.services.snapshot_assembler import SnapshotAssembler

MEDIA_BASE_URL = "https://cdn.example.com"


@pytest.fixture
def now():
    """Fixed evaluation time for deterministic discount and freshness checks"""
    return datetime(2025, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def media_url_resolver():
    return MediaUrlResolver(base_url=MEDIA_BASE_URL)


@pytest.fixture
def assembler(media_url_resolver):
    return SnapshotAssembler(media_url_resolver=media_url_resolver)


@pytest.fixture
def minimal_product():
    """Product aggregate with nothing but an id"""
    return ProductAggregate(id=1)


@pytest.fixture
def product_payload(now):
    """Fully-hydrated product aggregate as the loader would supply it"""
    return {
        "id": 42,
        "sku": "TSHIRT-001",
        "slug": "classic-cotton-tshirt",
        "name": "Classic Cotton T-Shirt",
        "description": "A soft cotton t-shirt for everyday wear.",
        "short_description": "Soft everyday tee",
        "status": 1,
        "visibility": "visible",
        "type": "variable",
        "price": 1000.0,
        "cost": 600.0,
        "old_price": 1200.0,
        "discount_percent": 10,
        "discount_start": (now - timedelta(days=5)).isoformat(),
        "discount_end": (now + timedelta(days=10)).isoformat(),
        "tax_rate": 5,
        "tax_included": False,
        "stock": 8,
        "low_stock_threshold": 10,
        "stock_status": "in_stock",
        "sold_count": 120,
        "shops": [
            {"shop_id": 1, "shop_name": "Dhaka Central", "shop_slug": "dhaka-central", "quantity": 5},
            {"shop_id": 2, "shop_name": "Chittagong", "quantity": 3},
        ],
        "category": {"id": 10, "name": "Men", "slug": "men"},
        "sub_category": {"id": 11, "name": "Clothing", "slug": "clothing"},
        "child_sub_category": {"id": 12, "name": "T-Shirts", "slug": "t-shirts"},
        "tags": ["cotton", "summer"],
        "brand": {"id": 3, "name": "Acme", "slug": "acme", "logo": "acme.png"},
        "supplier": {
            "id": 7,
            "name": "Acme Textiles",
            "phone": "+8801700000000",
            "email": "sales@acme.example",
            "address": "Plot 9, Gazipur",
        },
        "country": {"id": 18, "name": "Bangladesh", "code": "BD"},
        "variations": [
            {
                "id": 101,
                "product_id": 42,
                "sku": "TSHIRT-001-S",
                "attributes": {"size": "S"},
                "regular_price": 1000.0,
                "stock_quantity": 4,
            },
            {
                "id": 102,
                "product_id": 42,
                "sku": "TSHIRT-001-L",
                "attributes": {"size": "L"},
                "regular_price": 1200.0,
                "sale_price": 900.0,
                "stock_quantity": 0,
                "stock_status": "out_of_stock",
                "primary_photo": {"id": 5, "photo": "tshirt-l.jpg"},
            },
        ],
        "product_attributes": [{"id": 1, "name": "Material", "value": "Cotton"}],
        "approved_reviews": [
            {"rating": 5, "is_verified_purchase": True, "is_recommended": True},
            {"rating": 4, "is_verified_purchase": True, "is_recommended": True},
            {"rating": 2, "is_verified_purchase": False, "is_recommended": False},
        ],
        "analytics": {
            "views_count": 1500,
            "clicks_count": 300,
            "add_to_cart_count": 80,
            "purchase_count": 40,
            "wishlist_count": 25,
            "conversion_rate": 2.6667,
        },
        "primary_photo": {"id": 1, "photo": "tshirt.jpg", "alt_text": "Front view", "width": 800, "height": 800},
        "photos": [
            {"id": 2, "photo": "tshirt-back.jpg", "position": 1},
            {"id": 3, "photo": "tshirt-side.jpg", "alt_text": "Side", "position": 2},
        ],
        "videos": [{"id": 1, "url": "https://youtu.be/abc"}],
        "specifications": [
            {"group": "Fabric", "name": "Material", "value": "100% Cotton"},
            {"group": None, "name": "Fit", "value": "Regular"},
            {"group": "Fabric", "name": "GSM", "value": "180"},
        ],
        "seo_meta": [
            {"name": "meta_title", "content": "Buy Classic Cotton T-Shirt"},
            {"name": "meta_keywords", "content": "tshirt, cotton ,summer"},
        ],
        "faqs": [{"id": 1, "question": "Is it pre-shrunk?", "answer": "Yes"}],
        "related_products": [
            {"related_product_id": 50, "relation_type": "similar"},
            {"related_product_id": 51, "relation_type": "frequently_bought_together"},
            {"related_product_id": 52, "relation_type": "similar"},
        ],
        "bulk_pricing": [{"min_quantity": 10, "max_quantity": 49, "price": 900.0, "discount_percentage": 10}],
        "is_featured": True,
        "created_by": {"id": 1, "first_name": "Rahim", "last_name": "Uddin"},
        "created_at": (now - timedelta(days=10)).isoformat(),
        "updated_at": (now - timedelta(days=1)).isoformat(),
    }


@pytest.fixture
def sample_product(product_payload):
    return ProductAggregate(**product_payload)

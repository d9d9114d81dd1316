"""
Enums and choices for the product catalogue.
"""
from django.db import models


class ProductCategory(models.TextChoices):
    BUILDING_MATERIALS = 'building_materials', 'Building Materials'
    CLAY_BRICKS = 'clay_bricks', 'Clay Bricks'
    CONCRETE_BLOCKS = 'concrete_blocks', 'Concrete Blocks'
    FLY_ASH_BRICKS = 'fly_ash_bricks', 'Fly Ash Bricks'
    AAC_BLOCKS = 'aac_blocks', 'AAC Blocks'
    CEMENT = 'cement', 'Cement'
    SAND = 'sand', 'Sand'
    AGGREGATES = 'aggregates', 'Aggregates'
    OTHER = 'other', 'Other'


class BusinessRules:
    DEFAULT_PRICE_UNIT = 'per piece'
    MIN_NAME_LENGTH = 2


class ErrorMessages:
    PRODUCT_NOT_FOUND = "Product not found"
    NOT_YOUR_PRODUCT = "You can only change your own products"
    NAME_TOO_SHORT = "Product name must be at least 2 characters"
    NON_POSITIVE_PRICE = "Price must be a positive number"
    HAS_ORDERS = "Products with customer orders cannot be deleted. Mark it unavailable instead"


class ResponseMessages:
    CREATED = "Product created"
    UPDATED = "Product updated"
    DELETED = "Product deleted"
    AVAILABLE = "Product is now available"
    UNAVAILABLE = "Product is now unavailable"

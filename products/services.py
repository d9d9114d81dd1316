"""
Product catalogue management for manufacturers and public browsing.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from django.core.exceptions import ValidationError
from django.db.models import Q, RestrictedError
from django.contrib.auth import get_user_model

from .enums import BusinessRules, ErrorMessages
from .models import Product

User = get_user_model()
logger = logging.getLogger(__name__)


class ProductService:

    EDITABLE_FIELDS = (
        'name', 'category', 'description', 'dimensions', 'price', 'price_unit',
        'stock_quantity', 'is_available', 'specifications', 'image_url',
    )

    @staticmethod
    def _check_owner(product: Product, user: User) -> None:
        if product.manufacturer_id != user.pk:
            raise ValidationError(ErrorMessages.NOT_YOUR_PRODUCT)

    @staticmethod
    def _validate(name: str, price: Decimal) -> None:
        if len((name or '').strip()) < BusinessRules.MIN_NAME_LENGTH:
            raise ValidationError({'name': [ErrorMessages.NAME_TOO_SHORT]})
        if price is None or Decimal(price) <= 0:
            raise ValidationError({'price': [ErrorMessages.NON_POSITIVE_PRICE]})

    @staticmethod
    def create_product(manufacturer: User, **data) -> Product:
        ProductService._validate(data.get('name'), data.get('price'))
        data['price_unit'] = data.get('price_unit') or BusinessRules.DEFAULT_PRICE_UNIT
        product = Product.objects.create(manufacturer=manufacturer, **data)
        logger.info("Manufacturer %s added product %s", manufacturer.pk, product.pk)
        return product

    @staticmethod
    def update_product(product: Product, user: User, **data) -> Product:
        ProductService._check_owner(product, user)
        ProductService._validate(data.get('name', product.name), data.get('price', product.price))
        for field in ProductService.EDITABLE_FIELDS:
            if field in data:
                setattr(product, field, data[field])
        if not product.price_unit:
            product.price_unit = BusinessRules.DEFAULT_PRICE_UNIT
        product.save()
        return product

    @staticmethod
    def delete_product(product: Product, user: User) -> None:
        ProductService._check_owner(product, user)
        product_id = product.pk
        try:
            product.delete()
        except RestrictedError:
            raise ValidationError(ErrorMessages.HAS_ORDERS)
        logger.info("Manufacturer %s deleted product %s", user.pk, product_id)

    @staticmethod
    def set_availability(product: Product, user: User, is_available: Optional[bool] = None) -> Product:
        """Switch a product on or off the public catalogue; ``None`` flips it."""
        ProductService._check_owner(product, user)
        product.is_available = (not product.is_available) if is_available is None else is_available
        product.save(update_fields=['is_available', 'updated_at'])
        return product

    @staticmethod
    def for_manufacturer(manufacturer: User) -> List[Product]:
        return list(Product.objects.filter(manufacturer=manufacturer).order_by('-created_at'))

    @staticmethod
    def browse(
        manufacturer_id: Optional[int] = None,
        category: Optional[str] = None,
        query: Optional[str] = None
    ) -> List[Product]:
        """Available products, newest first."""
        queryset = Product.objects.filter(is_available=True).select_related('manufacturer')
        if manufacturer_id:
            queryset = queryset.filter(manufacturer_id=manufacturer_id)
        if category:
            queryset = queryset.filter(category=category)
        if query:
            queryset = queryset.filter(Q(name__icontains=query) | Q(description__icontains=query))
        return list(queryset)

from django.db.models import Q

from apps.common.repository import GenericRepository
from .models import Product


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def list_by_category(self, category: str):
        return self.model.objects.filter(category__iexact=category)

    def search(self, value: str):
        return self.model.objects.filter(
            Q(name__icontains=value) | Q(category__icontains=value)
        )

    def upsert(self, *, name: str, **fields):
        product, created = self.model.objects.update_or_create(name=name, defaults=fields)
        return product, created

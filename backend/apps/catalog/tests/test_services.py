import unittest
from decimal import Decimal

from apps.catalog.services import ProductService


class FakeCache:
    def __init__(self):
        self.store = {}

    def get(self, key, default=None):
        return self.store.get(key, default)

    def set(self, key, value, timeout=None):
        self.store[key] = value


class StubProduct:
    def __init__(self, product_id: int, name: str, category: str, cost: str, rating: int = 0, image: str = ''):
        self.id = product_id
        self.name = name
        self.category = category
        self.cost = cost
        self.rating = rating
        self.image = image


class FakeProductRepository:
    def __init__(self):
        self._products = {}
        self._pk = 1
        self.list_calls = 0

    def add(self, name, category, cost, rating=0, image=''):
        product = StubProduct(self._pk, name, category, cost, rating, image)
        self._products[self._pk] = product
        self._pk += 1
        return product

    def get(self, **filters):
        return self._products.get(filters.get('id'))

    def list(self, **filters):
        self.list_calls += 1
        return list(self._products.values())

    def list_by_category(self, category: str):
        return [p for p in self._products.values() if p.category.lower() == category.lower()]

    def search(self, value: str):
        term = value.lower()
        return [
            p for p in self._products.values()
            if term in p.name.lower() or term in p.category.lower()
        ]


class ProductServiceUnitTests(unittest.TestCase):
    def setUp(self):
        self.repo = FakeProductRepository()
        self.cache = FakeCache()
        self.service = ProductService(products=self.repo, cache_backend=self.cache, disable_cache=True)
        self.shoe = self.repo.add('Tan Leatherette Weekender Duffle', 'Fashion', '150', rating=4, image='duffle.png')
        self.lamp = self.repo.add('Atlas Desk Lamp', 'Home & Kitchen', '22.50', rating=3)

    def test_get_product_maps_to_dto(self):
        dto = self.service.get_product(self.shoe.id)
        self.assertEqual(dto.name, 'Tan Leatherette Weekender Duffle')
        self.assertEqual(dto.cost, Decimal('150'))
        self.assertEqual(dto.rating, 4)
        self.assertEqual(dto.image, 'duffle.png')

    def test_get_product_missing_returns_none(self):
        self.assertIsNone(self.service.get_product(999))

    def test_list_by_category_is_case_insensitive(self):
        dtos = self.service.list_products(category='fashion')
        self.assertEqual([d.id for d in dtos], [self.shoe.id])

    def test_search_matches_name_or_category(self):
        self.assertEqual([d.id for d in self.service.search_products('lamp')], [self.lamp.id])
        self.assertEqual([d.id for d in self.service.search_products('KITCHEN')], [self.lamp.id])
        self.assertEqual(self.service.search_products('bicycle'), [])

    def test_blank_search_lists_everything(self):
        self.assertEqual(len(self.service.search_products('   ')), 2)

    def test_list_products_cache_hit(self):
        cached_service = ProductService(products=self.repo, cache_backend=self.cache)
        first = cached_service.list_products()
        second = cached_service.list_products()
        self.assertEqual(len(first), 2)
        self.assertEqual(first, second)
        self.assertEqual(self.repo.list_calls, 1)

    def test_invalidate_cache_forces_reload(self):
        cached_service = ProductService(products=self.repo, cache_backend=self.cache)
        cached_service.list_products()
        self.repo.add('Bluetooth Speaker', 'Electronics', '40')
        self.assertEqual(len(cached_service.list_products()), 2)
        cached_service.invalidate_cache()
        self.assertEqual(len(cached_service.list_products()), 3)
        self.assertEqual(self.repo.list_calls, 2)


if __name__ == '__main__':
    unittest.main()

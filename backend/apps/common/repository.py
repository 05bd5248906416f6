from typing import Generic, Iterable, Optional, Type, TypeVar

from django.db import models

T = TypeVar("T", bound=models.Model)


class GenericRepository(Generic[T]):
    """Minimal ORM-backed repository; apps subclass it and add their own queries."""

    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def list(self, **filters) -> Iterable[T]:
        return self.model.objects.filter(**filters)

    def exists(self, **filters) -> bool:
        return self.model.objects.filter(**filters).exists()

    def update(self, obj: T, *, update_fields=None, **data) -> T:
        for key, value in data.items():
            setattr(obj, key, value)
        obj.save(update_fields=update_fields)
        return obj

    def delete(self, obj: T) -> None:
        obj.delete()

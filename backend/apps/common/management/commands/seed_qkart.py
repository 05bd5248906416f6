from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.carts.models import Cart, CartItem
from apps.catalog.container import build_product_service
from apps.catalog.models import Product
from apps.catalog.repositories import ProductRepository
from apps.users.models import User

IMAGE_BASE = "https://crio-directus-assets.s3.ap-south-1.amazonaws.com"

# name, category, cost, rating, image
PRODUCTS = [
    ("UNIFACTOR Mens Running Shoes", "Fashion", "50", 5, f"{IMAGE_BASE}/42d4d057-8704-4174-8d74-e5e9052677c6.png"),
    ("YONEX Smash Badminton Racquet", "Sports", "100", 5, f"{IMAGE_BASE}/64b930f7-3c82-4a29-a433-dbc6f1493578.png"),
    ("Tan Leatherette Weekender Duffle", "Fashion", "150", 4, f"{IMAGE_BASE}/ff071a1c-1099-48f9-9b03-f858ccc53832.png"),
    ("The Minimalist Slim Leather Watch", "Electronics", "60", 5, f"{IMAGE_BASE}/5b478a4a-bf81-467c-964c-7881887799b7.png"),
    ("Atrangi Boat Neck Tunic", "Fashion", "30", 4, f"{IMAGE_BASE}/a3d3f5f6-6d59-4f4b-8b1a-6a7f1e1b9f0e.png"),
    ("Bonsai Spirit Tree Table Lamp", "Home & Kitchen", "70", 3, f"{IMAGE_BASE}/1e8a3c1c-6c59-4c8f-9c5e-8a1f0b3f6f4e.png"),
    ("Stylish Wooden Wall Clock", "Home & Kitchen", "40", 4, f"{IMAGE_BASE}/7a1d9f1e-6b7c-4d1e-a2b1-3f9e0c2d5a6b.png"),
    ("Noise ColorFit Pro 2 Smartwatch", "Electronics", "90", 4, f"{IMAGE_BASE}/c1a0f9b2-3d4e-4f5a-8b6c-7d8e9f0a1b2c.png"),
    ("Nivia Storm Football", "Sports", "20", 3, f"{IMAGE_BASE}/2f3e4d5c-6b7a-4891-a2b3-c4d5e6f7a8b9.png"),
    ("Classic Pressure Cooker 5L", "Home & Kitchen", "45", 4, f"{IMAGE_BASE}/9e8d7c6b-5a4f-4e3d-b2c1-a0f9e8d7c6b5.png"),
    ("Bluetooth Portable Speaker", "Electronics", "35", 4, f"{IMAGE_BASE}/3c4d5e6f-7a8b-4c9d-8e0f-1a2b3c4d5e6f.png"),
    ("Cosco Cricket Tennis Ball Pack", "Sports", "15", 5, f"{IMAGE_BASE}/8b9c0d1e-2f3a-4b4c-9d5e-6f7a8b9c0d1e.png"),
]

DEMO_USER = {
    "name": "crio-user",
    "email": "crio-user@gmail.com",
    "password": "learnCode1",
    "address": "ITPL Main Rd, Bengaluru, Karnataka 560066",
}


class Command(BaseCommand):
    help = "Seed the QKart product catalog (and optionally a demo account)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete carts and products before seeding"
        )
        parser.add_argument(
            "--with-demo-user",
            action="store_true",
            help="Create or reset a demo account with an address set",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing carts and products...")
            CartItem.objects.all().delete()
            Cart.objects.all().delete()
            Product.objects.all().delete()

        self.stdout.write("Seeding products...")
        repo = ProductRepository()
        created_count = 0
        for name, category, cost, rating, image in PRODUCTS:
            _product, created = repo.upsert(
                name=name,
                category=category,
                cost=Decimal(cost),
                rating=rating,
                image=image,
            )
            created_count += int(created)
        self.stdout.write(
            f"Products: {created_count} created, {len(PRODUCTS) - created_count} updated"
        )

        if options["with_demo_user"]:
            self.stdout.write("Seeding demo user...")
            user = User.objects.filter(email=DEMO_USER["email"]).first()
            if user is None:
                user = User.objects.create_user(
                    email=DEMO_USER["email"],
                    password=DEMO_USER["password"],
                    name=DEMO_USER["name"],
                )
            else:
                user.set_password(DEMO_USER["password"])
            user.address = DEMO_USER["address"]
            user.save()

        build_product_service().invalidate_cache()
        self.stdout.write(self.style.SUCCESS("QKart seed completed."))

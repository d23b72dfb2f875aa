from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.models import Category
from modules.products.models import Product

SEED_CATALOG: dict[str, list[tuple[str, Decimal, int]]] = {
    "Electronics": [
        ("Wireless Mouse", Decimal("24.90"), 120),
        ("Mechanical Keyboard", Decimal("89.00"), 35),
        ("USB-C Hub", Decimal("39.50"), 60),
    ],
    "Clothing": [
        ("Cotton T-Shirt", Decimal("15.00"), 200),
        ("Rain Jacket", Decimal("74.99"), 18),
    ],
    "Books": [
        ("Practical SQL", Decimal("32.00"), 25),
        ("The Pragmatic Programmer", Decimal("41.75"), 12),
    ],
    "Home": [],
}


class Command(BaseCommand):
    help = "Seed the catalog with sample categories and products."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog data...")

        categories_created = 0
        products_created = 0
        for category_name, products in SEED_CATALOG.items():
            category, created = Category.objects.get_or_create(name=category_name)
            categories_created += int(created)
            for name, price, stock in products:
                _, created = Product.objects.get_or_create(
                    name=name,
                    category=category,
                    defaults={"price": price, "stock": stock},
                )
                products_created += int(created)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={categories_created}, "
                f"products={products_created}"
            )
        )

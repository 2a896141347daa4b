from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductAlreadyExists
from modules.products.repositories import get_product_repository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("Mechanical Keyboard", 129000, "Hot-swappable, brown switches"),
    ("Wireless Mouse", 45000, "2.4 GHz receiver, 3 DPI levels"),
    ("USB-C Hub", 39000, "7-in-1, HDMI 4K output"),
    ("Monitor Arm", 89000, None),
    ("Laptop Stand", 52000, "Aluminium, foldable"),
]


class Command(BaseCommand):
    help = "Seed the product store with demo data (idempotent by name)."

    def handle(self, *args, **options):
        service = ProductService(repository=get_product_repository())
        created = 0
        skipped = 0

        for name, price, description in SEED_PRODUCTS:
            dto = CreateProductDTO(name=name, price=price, description=description)
            try:
                service.create_product(dto)
            except ProductAlreadyExists:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, skipped={skipped}"
            )
        )

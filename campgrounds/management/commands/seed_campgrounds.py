"""Management command to fill the database with sample campgrounds.

Usage::

    python manage.py seed_campgrounds --count 20 --reset

``--reset`` deletes every existing campground together with the reviews
it references before seeding. ``--database`` picks the connection alias
(defaults to the CAMPGROUND_DATABASE setting).
"""

from __future__ import annotations

import random
from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from campgrounds.services import CampgroundStore

DESCRIPTORS = ["Forest", "Ancient", "Petrified", "Roaring", "Cascade", "Tumbling", "Silent", "Misty"]
PLACES = ["Flats", "Village", "Canyon", "Pond", "Creek", "Hollow", "Lake", "Bluffs"]
LOCATIONS = [
    "Boulder, CO", "Moab, UT", "Bend, OR", "Asheville, NC",
    "Flagstaff, AZ", "Bozeman, MT", "Tahoe City, CA", "Ely, MN",
]


class Command(BaseCommand):
    help = "Create sample campgrounds for local development."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=10,
            help="How many campgrounds to create (default 10)",
        )
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete existing campgrounds and their reviews first",
        )
        parser.add_argument(
            "--database",
            default=None,
            help="Database alias to seed (defaults to CAMPGROUND_DATABASE)",
        )
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed for reproducible sample data",
        )

    def handle(self, *args, **options):
        count = options["count"]
        if count < 0:
            raise CommandError("--count must be zero or more.")

        using = options["database"] or getattr(settings, "CAMPGROUND_DATABASE", "default")
        store = CampgroundStore(using=using)
        rng = random.Random(options["seed"])

        if options["reset"]:
            existing = store.list_all()
            self.stdout.write(self.style.NOTICE(f"Removing {len(existing)} campground(s)..."))
            for camp in existing:
                store.delete_with_reviews(camp.pk)

        for _ in range(count):
            store.create({
                "title": f"{rng.choice(DESCRIPTORS)} {rng.choice(PLACES)}",
                "location": rng.choice(LOCATIONS),
                "price": Decimal(rng.randint(500, 4000)) / 100,
                "description": "Quiet sites, clean water and a long view of the night sky.",
            })

        self.stdout.write(self.style.SUCCESS(f"Seeded {count} campground(s)."))

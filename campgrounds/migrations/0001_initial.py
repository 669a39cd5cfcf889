import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Review",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("body", models.TextField(help_text="Review text.")),
                (
                    "rating",
                    models.PositiveSmallIntegerField(
                        help_text="Whole stars, 1 to 5.",
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "reviews",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Campground",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Nightly price.",
                        max_digits=8,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("description", models.TextField()),
                ("location", models.CharField(max_length=200)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "campgrounds",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="ReviewReference",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("position", models.PositiveIntegerField()),
                (
                    "campground",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="review_refs",
                        to="campgrounds.campground",
                    ),
                ),
                (
                    "review",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="references",
                        to="campgrounds.review",
                    ),
                ),
            ],
            options={
                "db_table": "campground_review_refs",
                "ordering": ["position"],
                "indexes": [
                    models.Index(fields=["campground", "position"], name="review_ref_position_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("campground", "review"), name="uniq_campground_review_ref"),
                ],
            },
        ),
        migrations.AddField(
            model_name="campground",
            name="reviews",
            field=models.ManyToManyField(
                blank=True,
                related_name="campgrounds",
                through="campgrounds.ReviewReference",
                to="campgrounds.review",
            ),
        ),
    ]

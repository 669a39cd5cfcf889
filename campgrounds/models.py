"""
Data models for campground listings and their reviews.

Notes:
- A Campground keeps an ordered list of Review references through
  ReviewReference rows (`position` ascending = insertion order).
- (campground, review) is unique, so a reference can't be listed twice.
- Deleting a Review drops its reference rows. Deleting a Campground drops
  its reference rows but leaves the Reviews themselves in place; use
  CampgroundStore.delete_with_reviews() for the cascading delete.
"""

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Index

RATING_MIN = 1
RATING_MAX = 5


class Review(models.Model):
    """A rating plus free-text body submitted against one campground."""

    body = models.TextField(help_text="Review text.")
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)],
        help_text="Whole stars, 1 to 5.",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "reviews"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.rating}/5: {self.body[:40]}"


class Campground(models.Model):
    """
    The primary listing. Title, price, description and location are the
    attributes edit submissions overwrite.
    """

    title = models.CharField(max_length=200)
    price = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Nightly price.",
    )
    description = models.TextField()
    location = models.CharField(max_length=200)

    reviews = models.ManyToManyField(
        Review,
        through="ReviewReference",
        related_name="campgrounds",
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "campgrounds"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.title} ({self.location})"

    def ordered_reviews(self) -> list[Review]:
        """
        Referenced reviews in list order. Uses the prefetch cache when the
        campground was loaded with include_reviews=True.
        """
        return [ref.review for ref in self.review_refs.all()]

    def review_ids(self) -> list[int]:
        return [ref.review_id for ref in self.review_refs.all()]


class ReviewReference(models.Model):
    """One slot in a campground's ordered review list."""

    campground = models.ForeignKey(
        Campground, on_delete=models.CASCADE, related_name="review_refs"
    )
    review = models.ForeignKey(
        Review, on_delete=models.CASCADE, related_name="references"
    )
    position = models.PositiveIntegerField()

    class Meta:
        db_table = "campground_review_refs"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["campground", "review"],
                name="uniq_campground_review_ref",
            ),
        ]
        indexes = [
            Index(fields=["campground", "position"], name="review_ref_position_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.campground_id} -> review {self.review_id} @{self.position}"

from decimal import Decimal

from django.core.exceptions import ValidationError as ModelValidationError
from django.db import IntegrityError, transaction
from django.test import TestCase

from campgrounds.models import Campground, Review, ReviewReference


class CampgroundModelTests(TestCase):
    def setUp(self):
        self.camp = Campground.objects.create(
            title="Pine Lake",
            price=Decimal("10.00"),
            description="nice",
            location="CO",
        )

    def test_create_campground_minimal(self):
        self.assertEqual(str(self.camp), "Pine Lake (CO)")
        self.assertEqual(self.camp._meta.db_table, "campgrounds")
        self.assertEqual(self.camp.ordered_reviews(), [])

    def test_ordered_reviews_follow_position(self):
        first = Review.objects.create(body="first", rating=4)
        second = Review.objects.create(body="second", rating=2)
        # inserted out of order on purpose
        ReviewReference.objects.create(campground=self.camp, review=second, position=1)
        ReviewReference.objects.create(campground=self.camp, review=first, position=0)

        self.assertEqual(self.camp.ordered_reviews(), [first, second])
        self.assertEqual(self.camp.review_ids(), [first.pk, second.pk])
        self.assertEqual(list(self.camp.reviews.order_by("pk")), [first, second])

    def test_reference_pair_is_unique(self):
        review = Review.objects.create(body="once", rating=5)
        ReviewReference.objects.create(campground=self.camp, review=review, position=0)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                ReviewReference.objects.create(campground=self.camp, review=review, position=1)

    def test_deleting_review_drops_its_reference(self):
        review = Review.objects.create(body="gone soon", rating=3)
        ReviewReference.objects.create(campground=self.camp, review=review, position=0)
        review.delete()
        self.assertFalse(ReviewReference.objects.filter(campground=self.camp).exists())


class ReviewModelTests(TestCase):
    def test_rating_range_is_validated(self):
        review = Review(body="too good", rating=6)
        with self.assertRaises(ModelValidationError):
            review.full_clean()

    def test_str_shows_rating(self):
        review = Review.objects.create(body="Lovely spot by the water", rating=5)
        self.assertTrue(str(review).startswith("5/5"))
        self.assertEqual(review._meta.db_table, "reviews")

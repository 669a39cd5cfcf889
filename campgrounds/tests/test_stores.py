from decimal import Decimal

from django.test import TestCase

from campgrounds.errors import NotFoundError
from campgrounds.models import Campground, Review, ReviewReference
from campgrounds.services import CampgroundStore, ReviewStore

PINE_LAKE = {
    "title": "Pine Lake",
    "price": Decimal("10"),
    "description": "nice",
    "location": "CO",
}


class CampgroundStoreTests(TestCase):
    def setUp(self):
        self.store = CampgroundStore(using="default")
        self.reviews = ReviewStore(using="default")

    def test_create_then_get_round_trip(self):
        camp = self.store.create(PINE_LAKE)
        found = self.store.get_by_id(camp.pk)
        self.assertEqual(found.title, "Pine Lake")
        self.assertEqual(found.price, Decimal("10"))
        self.assertEqual(found.description, "nice")
        self.assertEqual(found.location, "CO")
        self.assertEqual(found.review_ids(), [])

    def test_create_ignores_unknown_attributes(self):
        camp = self.store.create({**PINE_LAKE, "reviews": [1, 2], "id": 999})
        self.assertNotEqual(camp.pk, 999)
        self.assertEqual(camp.review_ids(), [])

    def test_list_all_in_insertion_order(self):
        a = self.store.create(PINE_LAKE)
        b = self.store.create({**PINE_LAKE, "title": "Aspen Creek"})
        self.assertEqual([c.pk for c in self.store.list_all()], [a.pk, b.pk])

    def test_get_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.store.get_by_id(12345)
        self.assertEqual(ctx.exception.status_code, 404)

    def test_get_with_reviews_resolves_records(self):
        camp = self.store.create(PINE_LAKE)
        r1 = self.reviews.create({"body": "great", "rating": 5})
        r2 = self.reviews.create({"body": "ok", "rating": 3})
        self.store.add_review(camp.pk, r1.pk)
        self.store.add_review(camp.pk, r2.pk)

        found = self.store.get_by_id(camp.pk, include_reviews=True)
        with self.assertNumQueries(0):
            reviews = found.ordered_reviews()
        self.assertEqual([r.body for r in reviews], ["great", "ok"])

    def test_update_overwrites_attributes(self):
        camp = self.store.create(PINE_LAKE)
        updated = self.store.update(camp.pk, {"title": "Pine Lake North", "price": Decimal("12.50")})
        self.assertEqual(updated.pk, camp.pk)
        fresh = Campground.objects.get(pk=camp.pk)
        self.assertEqual(fresh.title, "Pine Lake North")
        self.assertEqual(fresh.price, Decimal("12.50"))
        self.assertEqual(fresh.location, "CO")

    def test_update_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.store.update(12345, PINE_LAKE)

    def test_delete_leaves_reviews_in_place(self):
        camp = self.store.create(PINE_LAKE)
        review = self.reviews.create({"body": "orphan to be", "rating": 4})
        self.store.add_review(camp.pk, review.pk)

        self.store.delete(camp.pk)

        self.assertFalse(Campground.objects.filter(pk=camp.pk).exists())
        self.assertTrue(Review.objects.filter(pk=review.pk).exists())
        self.assertFalse(ReviewReference.objects.exists())

    def test_delete_missing_is_noop(self):
        self.store.delete(12345)

    def test_delete_with_reviews_cascades(self):
        camp = self.store.create(PINE_LAKE)
        other = self.store.create({**PINE_LAKE, "title": "Other"})
        mine = self.reviews.create({"body": "mine", "rating": 4})
        theirs = self.reviews.create({"body": "theirs", "rating": 2})
        self.store.add_review(camp.pk, mine.pk)
        self.store.add_review(other.pk, theirs.pk)

        removed = self.store.delete_with_reviews(camp.pk)

        self.assertEqual(removed, 1)
        self.assertFalse(Campground.objects.filter(pk=camp.pk).exists())
        self.assertFalse(Review.objects.filter(pk=mine.pk).exists())
        self.assertTrue(Review.objects.filter(pk=theirs.pk).exists())
        self.assertEqual(self.store.get_by_id(other.pk).review_ids(), [theirs.pk])

    def test_add_review_appends_once(self):
        camp = self.store.create(PINE_LAKE)
        first = self.reviews.create({"body": "a", "rating": 1})
        second = self.reviews.create({"body": "b", "rating": 2})
        self.store.add_review(camp.pk, first.pk)
        self.store.add_review(camp.pk, second.pk)
        self.store.add_review(camp.pk, first.pk)  # retry

        self.assertEqual(self.store.get_by_id(camp.pk).review_ids(), [first.pk, second.pk])

    def test_remove_review_reference(self):
        camp = self.store.create(PINE_LAKE)
        review = self.reviews.create({"body": "a", "rating": 1})
        self.store.add_review(camp.pk, review.pk)

        self.store.remove_review_reference(camp.pk, review.pk)

        self.assertEqual(self.store.get_by_id(camp.pk).review_ids(), [])
        self.assertTrue(Review.objects.filter(pk=review.pk).exists())


class ReviewStoreTests(TestCase):
    def setUp(self):
        self.store = ReviewStore()

    def test_create_and_delete(self):
        review = self.store.create({"body": "lovely", "rating": 5})
        self.assertIsNotNone(review.pk)
        self.store.delete_by_id(review.pk)
        self.assertFalse(Review.objects.filter(pk=review.pk).exists())

    def test_delete_missing_is_noop(self):
        self.store.delete_by_id(12345)
        self.assertEqual(Review.objects.count(), 0)

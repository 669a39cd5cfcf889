"""
Data-access layer for campgrounds and reviews.

Each store is bound to a database alias (`using`) handed in by the caller,
so views and commands decide which connection the operations run on.

    store = CampgroundStore(using="default")
    camp = store.create({"title": "Pine Lake", "price": 10, ...})
    camp = store.get_by_id(camp.pk, include_reviews=True)
"""

import logging

from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import Max, Prefetch

from campgrounds.errors import NotFoundError
from campgrounds.models import Campground, Review, ReviewReference

logger = logging.getLogger(__name__)

CAMPGROUND_FIELDS = ("title", "price", "description", "location")


class CampgroundStore:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def _objects(self):
        return Campground.objects.using(self.using)

    def list_all(self):
        return list(self._objects.all())

    def create(self, attributes: dict) -> Campground:
        camp = Campground(**_pick(attributes))
        camp.save(using=self.using)
        logger.info("Created campground %s (%s)", camp.pk, camp.title)
        return camp

    def get_by_id(self, campground_id, include_reviews: bool = False) -> Campground:
        """
        Fetch one campground or raise NotFoundError.
        With include_reviews=True the reference list is prefetched with its
        Review rows, so camp.ordered_reviews() costs no further queries.
        """
        qs = self._objects.all()
        if include_reviews:
            refs = (
                ReviewReference.objects.using(self.using)
                .select_related("review")
                .order_by("position")
            )
            qs = qs.prefetch_related(Prefetch("review_refs", queryset=refs))
        try:
            return qs.get(pk=campground_id)
        except Campground.DoesNotExist:
            raise NotFoundError("Campground not found")

    def update(self, campground_id, attributes: dict) -> Campground:
        camp = self.get_by_id(campground_id)
        changes = _pick(attributes)
        for name, value in changes.items():
            setattr(camp, name, value)
        camp.save(using=self.using, update_fields=[*changes, "updated_at"])
        return camp

    def delete(self, campground_id) -> None:
        """Remove the campground only. Referenced reviews are left in place."""
        deleted, _ = self._objects.filter(pk=campground_id).delete()
        if deleted:
            logger.info("Deleted campground %s", campground_id)

    def delete_with_reviews(self, campground_id) -> int:
        """
        Delete the campground and every review it references, in one transaction.
        Returns the number of reviews removed.
        """
        with transaction.atomic(using=self.using):
            review_ids = list(
                ReviewReference.objects.using(self.using)
                .filter(campground_id=campground_id)
                .values_list("review_id", flat=True)
            )
            _, per_model = Review.objects.using(self.using).filter(pk__in=review_ids).delete()
            self.delete(campground_id)
        return per_model.get(Review._meta.label, 0)

    def add_review(self, campground_id, review_id) -> ReviewReference:
        """
        Append a reference to the end of the campground's list.
        A review already on the list keeps its original slot.
        """
        refs = ReviewReference.objects.using(self.using)
        with transaction.atomic(using=self.using):
            last = refs.filter(campground_id=campground_id).aggregate(last=Max("position"))["last"]
            ref, created = refs.get_or_create(
                campground_id=campground_id,
                review_id=review_id,
                defaults={"position": 0 if last is None else last + 1},
            )
        if not created:
            logger.info("Review %s already referenced by campground %s", review_id, campground_id)
        return ref

    def remove_review_reference(self, campground_id, review_id) -> None:
        ReviewReference.objects.using(self.using).filter(
            campground_id=campground_id, review_id=review_id
        ).delete()


class ReviewStore:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def create(self, attributes: dict) -> Review:
        review = Review(body=attributes.get("body"), rating=attributes.get("rating"))
        review.save(using=self.using)
        return review

    def delete_by_id(self, review_id) -> None:
        Review.objects.using(self.using).filter(pk=review_id).delete()


def _pick(attributes: dict) -> dict:
    return {k: v for k, v in (attributes or {}).items() if k in CAMPGROUND_FIELDS}

from django import template

from campgrounds.models import RATING_MAX

register = template.Library()


@register.filter(name="stars")
def stars(rating):
    """
    Render a 1-5 rating as filled/empty stars.

    Usage: {{ review.rating|stars }}  ->  "★★★☆☆"
    Out-of-range or missing values are clamped into 0..5.
    """
    try:
        n = int(rating)
    except (TypeError, ValueError):
        n = 0
    n = max(0, min(RATING_MAX, n))
    return "★" * n + "☆" * (RATING_MAX - n)


@register.filter
def average_rating(reviews):
    """Mean rating of a list of reviews, one decimal; None when empty."""
    ratings = [r.rating for r in reviews or [] if r.rating is not None]
    if not ratings:
        return None
    return round(sum(ratings) / len(ratings), 1)

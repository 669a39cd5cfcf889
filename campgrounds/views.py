# ---- stdlib -----------------------------------------------------------------
import logging

# ---- Django ------------------------------------------------------------------
from django.conf import settings
from django.contrib import messages
from django.shortcuts import render, redirect
from django.db import DEFAULT_DB_ALIAS, transaction

# ---- App ---------------------------------------------------------------------
from .errors import DEFAULT_ERROR_MESSAGE, NotFoundError
from .forms import CampgroundForm, ReviewForm
from .middleware import render_error
from .services import CampgroundStore, ReviewStore
from .validation import validate_payload


# ---- Logging -----------------------------------------------------------------
logger = logging.getLogger(__name__)

# GET routes also answer HEAD; the server strips the body
READ_METHODS = ("GET", "HEAD")


# =============================================================================
# Helpers
# =============================================================================

def _db_alias() -> str:
    return getattr(settings, "CAMPGROUND_DATABASE", DEFAULT_DB_ALIAS)


def _campground_store() -> CampgroundStore:
    return CampgroundStore(using=_db_alias())


def _review_store() -> ReviewStore:
    return ReviewStore(using=_db_alias())


def page_not_found(request, *args, **kwargs):
    """Catch-all for unmatched paths and unsupported verbs on known paths."""
    raise NotFoundError("Page not Found")


# =============================================================================
# Errors raised outside a view (wired in config/urls.py and settings)
# =============================================================================

def bad_request(request, exception=None):
    """handler400: oversized, unreadable or suspicious request bodies."""
    return render_error(request, 400, "Bad Request")


def permission_denied(request, exception=None):
    return render_error(request, 403, "Forbidden")


def csrf_failure(request, reason=""):
    """CSRF_FAILURE_VIEW: the form token was missing or stale."""
    logger.warning("CSRF check failed on %s %s: %s", request.method, request.path, reason)
    return render_error(request, 403, "Form expired or invalid, please reload the page and try again")


def server_error(request):
    """handler500: failures in middleware or anywhere process_exception can't see."""
    return render_error(request, 500, DEFAULT_ERROR_MESSAGE)


# =============================================================================
# Pages
# =============================================================================

def home(request):
    if request.method not in READ_METHODS:
        return page_not_found(request)
    return render(request, "home.html")


# =============================================================================
# Campground CRUD
# =============================================================================

def campground_index(request):
    """GET lists every campground; POST creates one from `campground[...]`."""
    if request.method == "POST":
        return _campground_create(request)
    if request.method not in READ_METHODS:
        return page_not_found(request)

    campgrounds = _campground_store().list_all()
    return render(request, "campgrounds/index.html", {"campgrounds": campgrounds})


def _campground_create(request):
    form = validate_payload(CampgroundForm, request.POST)
    camp = _campground_store().create(form.cleaned_data)
    messages.success(request, f"Added {camp.title}.")
    return redirect("campgrounds:detail", pk=camp.pk)


def campground_new(request):
    if request.method not in READ_METHODS:
        return page_not_found(request)
    return render(request, "campgrounds/new.html", {"form": CampgroundForm()})


def campground_detail(request, pk: int):
    """GET shows one campground with its reviews; PUT overwrites; DELETE removes."""
    if request.method == "PUT":
        return _campground_update(request, pk)
    if request.method == "DELETE":
        return _campground_delete(request, pk)
    if request.method not in READ_METHODS:
        return page_not_found(request)

    camp = _campground_store().get_by_id(pk, include_reviews=True)
    return render(
        request,
        "campgrounds/show.html",
        {
            "campground": camp,
            "reviews": camp.ordered_reviews(),
            "review_form": ReviewForm(),
        },
    )


def _campground_update(request, pk: int):
    form = validate_payload(CampgroundForm, request.POST)
    camp = _campground_store().update(pk, form.cleaned_data)
    messages.success(request, f"Updated {camp.title}.")
    return redirect("campgrounds:detail", pk=camp.pk)


def _campground_delete(request, pk: int):
    removed = _campground_store().delete_with_reviews(pk)
    logger.info("Campground %s deleted with %s review(s)", pk, removed)
    messages.info(request, "Campground removed.")
    return redirect("campgrounds:index")


def campground_edit(request, pk: int):
    if request.method not in READ_METHODS:
        return page_not_found(request)
    camp = _campground_store().get_by_id(pk)
    return render(
        request,
        "campgrounds/edit.html",
        {"campground": camp, "form": CampgroundForm(instance=camp)},
    )


# =============================================================================
# Reviews (nested under a campground)
# =============================================================================

def review_create(request, pk: int):
    if request.method != "POST":
        return page_not_found(request)

    form = validate_payload(ReviewForm, request.POST)
    campgrounds, reviews = _campground_store(), _review_store()
    camp = campgrounds.get_by_id(pk)

    # review row and its reference commit together
    with transaction.atomic(using=_db_alias()):
        review = reviews.create(form.cleaned_data)
        campgrounds.add_review(camp.pk, review.pk)

    messages.success(request, "Thanks for your review!")
    return redirect("campgrounds:detail", pk=camp.pk)


def review_delete(request, pk: int, review_id: int):
    if request.method != "DELETE":
        return page_not_found(request)

    with transaction.atomic(using=_db_alias()):
        _campground_store().remove_review_reference(pk, review_id)
        _review_store().delete_by_id(review_id)

    messages.info(request, "Review deleted.")
    return redirect("campgrounds:detail", pk=pk)

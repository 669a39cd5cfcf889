from django.urls import path, re_path
from . import views

app_name = "campgrounds"

urlpatterns = [
    # Home
    path("", views.home, name="home"),

    # Campgrounds (GET list / POST create)
    path("campgrounds", views.campground_index, name="index"),
    path("campgrounds/new", views.campground_new, name="new"),

    # Single campground (GET show / PUT update / DELETE remove)
    path("campgrounds/<int:pk>", views.campground_detail, name="detail"),
    path("campgrounds/<int:pk>/edit", views.campground_edit, name="edit"),

    # Reviews nested under a campground
    path("campgrounds/<int:pk>/reviews", views.review_create, name="review_create"),
    path("campgrounds/<int:pk>/reviews/<int:review_id>", views.review_delete, name="review_delete"),

    # Anything else is a 404 rendered through the error page
    re_path(r"^.*$", views.page_not_found, name="not_found"),
]

from django.urls import path, include

urlpatterns = [
    # Campgrounds app (namespaced); its last pattern catches every unmatched path
    path("", include(("campgrounds.urls", "campgrounds"), namespace="campgrounds")),
]

# Errors raised before a view runs render the same error page
handler400 = "campgrounds.views.bad_request"
handler403 = "campgrounds.views.permission_denied"
handler500 = "campgrounds.views.server_error"

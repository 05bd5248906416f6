from django.urls import include, path

urlpatterns = [
    path("products/", include("apps.catalog.urls")),
    path("users/", include("apps.users.urls")),
    path("cart/", include("apps.carts.urls")),
    path("auth/", include("apps.auth.urls")),
]

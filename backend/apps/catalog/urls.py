from django.urls import path

from .views import ProductDetailView, ProductListView, ProductSearchView

urlpatterns = [
    path("", ProductListView.as_view(), name="api-products-list"),
    path("search/", ProductSearchView.as_view(), name="api-products-search"),
    path("<int:product_id>/", ProductDetailView.as_view(), name="api-products-detail"),
]

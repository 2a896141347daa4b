"""Product URL configuration.

Routes ``/products`` and ``/products/{id}`` without a trailing slash;
ids that are not integers never reach the view and resolve to 404.
"""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.products.views import ProductViewSet

router = DefaultRouter(trailing_slash=False)
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls

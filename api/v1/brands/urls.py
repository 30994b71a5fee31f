"""
URL configuration for brand API endpoints.
"""

from django.urls import path

from api.v1.brands import views

app_name = "brands"

urlpatterns = [
    path(
        "brands",
        views.CreateBrandView.as_view(),
        name="create-brand",
    ),
    path(
        "brands/<int:brand_id>",
        views.BrandDetailView.as_view(),
        name="brand-detail",
    ),
]

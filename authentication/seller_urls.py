from django.urls import path

from authentication.api import views

app_name = "sellers"

urlpatterns = [
    path("verification/", views.SellerVerificationView.as_view(), name="verification"),
    path("sub-sellers/", views.SubSellerListView.as_view(), name="sub_sellers"),
]

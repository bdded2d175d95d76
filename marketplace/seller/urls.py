from django.urls import path

from marketplace.seller.api import views

app_name = "seller_portal"

urlpatterns = [
    path("products/", views.SellerProductsView.as_view(), name="products"),
    path("products/<uuid:product_id>/toggle-status/", views.SellerProductToggleView.as_view(), name="product_toggle"),
    path("orders/", views.SellerOrdersView.as_view(), name="orders"),
    path("orders/recent/", views.SellerRecentOrdersView.as_view(), name="recent_orders"),
    path("orders/<uuid:pk>/", views.SellerOrderDetailView.as_view(), name="order_detail"),
    path("orders/<uuid:pk>/status/", views.SellerOrderStatusView.as_view(), name="order_status"),
    path("earnings/", views.SellerEarningsView.as_view(), name="earnings"),
    path("category-commission/<str:category>/", views.SellerCategoryCommissionView.as_view(), name="category_commission"),
    path("bulk-upload/", views.SellerBulkUploadView.as_view(), name="bulk_upload"),
    path("bulk-upload/template/", views.SellerBulkUploadTemplateView.as_view(), name="bulk_upload_template"),
]

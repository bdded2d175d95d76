from django.urls import path

from marketplace.catalog.api import views as catalog_views
from marketplace.ordering.api import views as order_views

app_name = "marketplace"

urlpatterns = [
    # Products
    path("products/", catalog_views.ProductListCreateView.as_view(), name="products"),
    path(
        "products/category/<str:category>/",
        catalog_views.ProductCategoryListView.as_view(),
        name="products_by_category",
    ),
    path("products/single/<uuid:product_id>/", catalog_views.ProductDetailView.as_view(), name="product_detail"),
    path("products/update/<uuid:product_id>/", catalog_views.ProductUpdateView.as_view(), name="product_update"),
    path("products/delete/<uuid:product_id>/", catalog_views.ProductDeleteView.as_view(), name="product_delete"),
    path(
        "products/toggle-status/<uuid:product_id>/",
        catalog_views.ProductToggleStatusView.as_view(),
        name="product_toggle_status",
    ),
    path("products/admin/all/", catalog_views.AdminProductListView.as_view(), name="products_admin"),
    path("products/seller/<uuid:seller_id>/", catalog_views.SellerProductListView.as_view(), name="products_seller"),
    path("products/admin/delete-all/", catalog_views.ProductDeleteAllView.as_view(), name="products_delete_all"),
    # Subcategories, banners, posters
    path(
        "subcategories/category/<str:category>/",
        catalog_views.SubcategoryByCategoryView.as_view(),
        name="subcategories_by_category",
    ),
    path("subcategories/", catalog_views.SubcategoryCreateView.as_view(), name="subcategory_create"),
    path(
        "subcategories/admin/all/",
        catalog_views.AdminSubcategoryListView.as_view(),
        name="subcategories_admin",
    ),
    path(
        "subcategories/<uuid:subcategory_id>/",
        catalog_views.SubcategoryDeleteView.as_view(),
        name="subcategory_delete",
    ),
    path("banners/", catalog_views.BannerListCreateView.as_view(), name="banners"),
    path("banners/<uuid:banner_id>/", catalog_views.BannerDeleteView.as_view(), name="banner_delete"),
    path("posters/", catalog_views.PosterListCreateView.as_view(), name="posters"),
    path("posters/<uuid:poster_id>/", catalog_views.PosterDeleteView.as_view(), name="poster_delete"),
    # Bulk upload
    path("bulk-upload/products/", catalog_views.BulkUploadView.as_view(), name="bulk_upload"),
    path(
        "bulk-upload/template/products/",
        catalog_views.BulkUploadTemplateView.as_view(),
        name="bulk_upload_template",
    ),
    # Orders
    path("orders/", order_views.OrderListCreateView.as_view(), name="orders"),
    path("orders/my/", order_views.MyOrdersView.as_view(), name="my_orders"),
    path("orders/order/<str:order_id>/", order_views.OrderByOrderIdView.as_view(), name="order_by_order_id"),
    path(
        "orders/payment/<str:payment_id>/",
        order_views.OrderByPaymentIdView.as_view(),
        name="order_by_payment_id",
    ),
    path("orders/<uuid:pk>/status/", order_views.OrderStatusUpdateView.as_view(), name="order_status"),
    path("orders/<uuid:pk>/cancel/", order_views.OrderCancelView.as_view(), name="order_cancel"),
]

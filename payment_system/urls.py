from django.urls import path

from payment_system.api import views

app_name = "payment_system"

urlpatterns = [
    path("create-order/", views.create_payment_order, name="create_order"),
    path("verify/", views.verify_payment, name="verify"),
    path("status/<str:payment_id>/", views.payment_status, name="status"),
]

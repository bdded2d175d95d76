from django.urls import path

from authentication.api import views

app_name = "authentication"

urlpatterns = [
    path("register/", views.RegisterAPIView.as_view(), name="register"),
    path("register-seller/", views.SellerRegisterAPIView.as_view(), name="register_seller"),
    path("login/", views.LoginAPIView.as_view(), name="login"),
    path("forgot-password/", views.ForgotPasswordAPIView.as_view(), name="forgot_password"),
    path("reset-password/", views.ResetPasswordAPIView.as_view(), name="reset_password"),
    path("me/", views.MeAPIView.as_view(), name="me"),
]

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import (
    ForgotPasswordRequestSerializer,
    LoginRequestSerializer,
    RegisterRequestSerializer,
    ResetPasswordRequestSerializer,
    SellerRegisterRequestSerializer,
    SellerSerializer,
    UserSerializer,
)
from authentication.api.serializers.response_serializers import (
    AuthResponseSerializer,
    ErrorResponseSerializer,
    ForgotPasswordResponseSerializer,
    MessageResponseSerializer,
    SellerRegisterResponseSerializer,
)
from infrastructure.container import container
from utils.api import error_response


class RegisterAPIView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_register",
        summary="Register a customer account",
        description="Create a customer and return a 24h bearer token. Emails are unique across all accounts.",
        request=RegisterRequestSerializer,
        responses={
            201: OpenApiResponse(
                response=AuthResponseSerializer,
                description="Customer created",
                examples=[
                    OpenApiExample(
                        "Registered",
                        value={
                            "message": "User registered successfully",
                            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "name": "Asha Rao",
                                "email": "asha@example.com",
                                "role": "customer",
                            },
                        },
                    )
                ],
            ),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing fields or user exists"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = container.auth_service().register(data.get("name"), data.get("email"), data.get("password"))
        if not result.ok:
            return error_response(result)

        return Response(
            {
                "message": "User registered successfully",
                "token": result.value["token"],
                "user": UserSerializer(result.value["user"]).data,
            },
            status=status.HTTP_201_CREATED,
        )


class SellerRegisterAPIView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_register_seller",
        summary="Register a seller account",
        description="""
        Create a seller user with a **pending** seller profile.

        No token is returned: sellers can log in only after an admin approves them.
        Admins are alerted by email and notification.
        """,
        request=SellerRegisterRequestSerializer,
        responses={
            201: OpenApiResponse(response=SellerRegisterResponseSerializer, description="Seller registered"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing fields or email in use"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = SellerRegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = container.auth_service().register_seller(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
            seller_name=data.get("seller_name"),
            parent_seller_email=data.get("parent_seller_email"),
        )
        if not result.ok:
            return error_response(result)

        return Response(
            {
                "message": "Seller registered successfully. Please login to continue.",
                "seller": SellerSerializer(result.value).data,
            },
            status=status.HTTP_201_CREATED,
        )


class LoginAPIView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_login",
        summary="Login with email and password",
        description="""
        Authenticate with email and password.

        **Sellers** must be approved: pending or rejected sellers receive 403
        (their login counter is still updated).
        """,
        request=LoginRequestSerializer,
        responses={
            200: OpenApiResponse(response=AuthResponseSerializer, description="Login successful"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid credentials"),
            403: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Seller pending or rejected",
                examples=[
                    OpenApiExample(
                        "Pending seller",
                        value={
                            "message": "Seller approval pending. You will receive admin approval within 24 hours."
                        },
                    )
                ],
            ),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = container.auth_service().login(
            serializer.validated_data.get("email"), serializer.validated_data.get("password")
        )
        if not result.ok:
            return error_response(result)

        payload = {
            "message": "Login successful",
            "token": result.value["token"],
            "user": UserSerializer(result.value["user"]).data,
        }
        seller = result.value.get("seller")
        if seller is not None:
            payload["verification_status"] = seller.verification_status
        return Response(payload, status=status.HTTP_200_OK)


class ForgotPasswordAPIView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_forgot_password",
        summary="Request a password reset link",
        description="Always answers with the same message so account existence is not revealed.",
        request=ForgotPasswordRequestSerializer,
        responses={
            200: OpenApiResponse(response=ForgotPasswordResponseSerializer, description="Reset requested"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Email is required"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = ForgotPasswordRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = container.auth_service().forgot_password(serializer.validated_data.get("email"))
        if not result.ok:
            return error_response(result)
        return Response(result.value, status=status.HTTP_200_OK)


class ResetPasswordAPIView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_reset_password",
        summary="Reset password with an emailed token",
        request=ResetPasswordRequestSerializer,
        responses={
            200: OpenApiResponse(response=MessageResponseSerializer, description="Password reset"),
            400: OpenApiResponse(
                response=ErrorResponseSerializer, description="Missing fields, invalid or expired token"
            ),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = ResetPasswordRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = container.auth_service().reset_password(data.get("email"), data.get("token"), data.get("password"))
        if not result.ok:
            return error_response(result)
        return Response(result.value, status=status.HTTP_200_OK)


class MeAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="auth_me",
        summary="Current user",
        responses={
            200: UserSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Access token required"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid or expired token"),
        },
        tags=["Authentication"],
    )
    def get(self, request):
        return Response({"user": UserSerializer(request.user).data}, status=status.HTTP_200_OK)

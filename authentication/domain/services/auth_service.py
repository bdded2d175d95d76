"""
AuthService - registration, login and password reset.

Business rules:
- Emails are unique across every account (customers, sellers, admins).
- Sellers register without a token and must be approved before they can log in.
- Password reset tokens are 32 random bytes (hex) valid for 30 minutes.
"""

import secrets
from datetime import timedelta
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from authentication.api.serializers.jwt_serializers import issue_access_token
from authentication.infra.observability import login_total, password_reset_requests_total, registrations_total
from authentication.models import Seller
from utils.logging_utils import mask_email
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

User = get_user_model()

SELLER_REJECTED_MESSAGE = "Seller rejected by admin. Login not allowed."
SELLER_PENDING_MESSAGE = "Seller approval pending. You will receive admin approval within 24 hours."
FORGOT_PASSWORD_MESSAGE = "If the email exists, a reset link has been sent"


class AuthService(BaseService):
    def __init__(self, mailer, notifications):
        """
        Args:
            mailer: MailerService used for reset links and admin alerts
            notifications: NotificationService for admin inbox entries
        """
        super().__init__()
        self.mailer = mailer
        self.notifications = notifications

    @staticmethod
    def _normalize_email(email: Optional[str]) -> str:
        return (email or "").strip().lower()

    @BaseService.log_performance
    def register(self, name: str, email: str, password: str) -> ServiceResult[Dict[str, Any]]:
        email = self._normalize_email(email)
        if not name or not email or not password:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Name, email and password are required")
        if User.objects.filter(email__iexact=email).exists():
            return service_err(ErrorCodes.USER_EXISTS, "User already exists")

        user = User.objects.create_user(email=email, password=password, name=name.strip(), role="customer")
        registrations_total.labels(role="customer").inc()
        self.logger.info(f"Registered customer {mask_email(email)}")
        return service_ok({"user": user, "token": issue_access_token(user)})

    @BaseService.log_performance
    def register_seller(
        self,
        name: str,
        email: str,
        password: str,
        seller_name: Optional[str] = None,
        parent_seller_email: Optional[str] = None,
    ) -> ServiceResult[Seller]:
        """
        Create a seller account with a pending profile.

        The parent seller (optional) is resolved by email; the new seller sits
        one level below it. Admins are alerted by email and notification.
        """
        email = self._normalize_email(email)
        if not name or not email or not password:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Name, email and password are required")

        existing = User.objects.filter(email__iexact=email).first()
        if existing is not None:
            message = "Seller already exists" if existing.role == "seller" else "Email already exists"
            return service_err(ErrorCodes.USER_EXISTS, message)

        parent = None
        parent_email = self._normalize_email(parent_seller_email)
        if parent_email:
            parent = Seller.objects.select_related("user").filter(user__email__iexact=parent_email).first()
            if parent is None:
                self.logger.warning(f"Parent seller {mask_email(parent_email)} not found; registering as top level")

        with transaction.atomic():
            user = User.objects.create_user(email=email, password=password, name=name.strip(), role="seller")
            seller = Seller.objects.create(
                user=user,
                seller_name=(seller_name or name).strip(),
                parent_seller=parent,
                hierarchy_level=(parent.hierarchy_level + 1) if parent else 0,
                verification_status="pending",
                registered_on=timezone.now(),
            )

        registrations_total.labels(role="seller").inc()
        self.logger.info(f"Registered seller {mask_email(email)} at level {seller.hierarchy_level}")

        self.mailer.send_new_seller_alert(seller)
        self.notifications.notify(
            title="New Seller Registration",
            message=f"{seller.seller_name} ({email}) registered as a seller and awaits verification.",
            type="seller",
            priority="high",
            recipient_type="admin",
            related_entity_type="seller",
            related_entity_id=str(seller.id),
            action_url="/admin/sellers",
            metadata={
                "seller_name": seller.seller_name,
                "email": email,
                "hierarchy_level": seller.hierarchy_level,
                "parent_seller_email": parent.user.email if parent else None,
            },
            created_by=str(user.id),
            created_by_model="Seller",
        )
        return service_ok(seller)

    @BaseService.log_performance
    def login(self, email: str, password: str) -> ServiceResult[Dict[str, Any]]:
        email = self._normalize_email(email)
        if not email or not password:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Email and password are required")

        user = User.objects.filter(email__iexact=email).first()
        if user is None or not user.check_password(password) or not user.is_active:
            login_total.labels(status="invalid_credentials").inc()
            return service_err(ErrorCodes.INVALID_CREDENTIALS, "Invalid credentials")

        user.login_count += 1
        user.last_login = timezone.now()
        user.save(update_fields=["login_count", "last_login", "updated_at"])

        seller = None
        if user.role == "seller":
            seller = Seller.objects.filter(user=user).first()
            status = seller.verification_status if seller else "pending"
            if status == "rejected":
                login_total.labels(status="seller_rejected").inc()
                return service_err(ErrorCodes.SELLER_NOT_APPROVED, SELLER_REJECTED_MESSAGE)
            if status != "approved":
                login_total.labels(status="seller_pending").inc()
                return service_err(ErrorCodes.SELLER_NOT_APPROVED, SELLER_PENDING_MESSAGE)

        login_total.labels(status="success").inc()
        return service_ok({"user": user, "seller": seller, "token": issue_access_token(user)})

    def forgot_password(self, email: str) -> ServiceResult[Dict[str, Any]]:
        email = self._normalize_email(email)
        if not email:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Email is required")

        response: Dict[str, Any] = {"message": FORGOT_PASSWORD_MESSAGE}
        user = User.objects.filter(email__iexact=email).first()
        password_reset_requests_total.labels(known_email=str(user is not None).lower()).inc()
        if user is None:
            return service_ok(response)

        token = secrets.token_hex(32)
        user.reset_password_token = token
        user.reset_password_expires = timezone.now() + timedelta(
            minutes=getattr(settings, "PASSWORD_RESET_TOKEN_MINUTES", 30)
        )
        user.save(update_fields=["reset_password_token", "reset_password_expires", "updated_at"])

        reset_url = f"{settings.FRONTEND_URL}/reset-password?{urlencode({'token': token, 'email': user.email})}"
        email_configured = self.mailer.is_configured()
        if email_configured:
            self.mailer.send_password_reset(user, reset_url)
        else:
            self.logger.warning("Email not configured; reset link returned in response only")

        if settings.DEBUG or not email_configured:
            response["reset_url"] = reset_url
        return service_ok(response)

    @BaseService.log_performance
    def reset_password(self, email: str, token: str, password: str) -> ServiceResult[Dict[str, Any]]:
        email = self._normalize_email(email)
        if not email or not token or not password:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Email, token, and new password are required")

        user = User.objects.filter(email__iexact=email, reset_password_token=token).first()
        if user is None:
            return service_err(ErrorCodes.INVALID_RESET_TOKEN, "Invalid reset token")
        if not user.reset_password_expires or user.reset_password_expires < timezone.now():
            return service_err(ErrorCodes.RESET_TOKEN_EXPIRED, "Reset token has expired")

        user.set_password(password)
        user.reset_password_token = None
        user.reset_password_expires = None
        user.save(update_fields=["password", "reset_password_token", "reset_password_expires", "updated_at"])
        self.logger.info(f"Password reset for {mask_email(email)}")
        return service_ok({"message": "Password has been reset successfully"})

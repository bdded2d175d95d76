import os

# SECRET_KEY must exist before the base settings are evaluated
os.environ.setdefault("SECRET_KEY", "django-insecure-test-key-for-unit-tests-only")

from .settings import *  # noqa: F403

DEBUG = False
TESTING = True

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Keep external services out of the test run
INFRASTRUCTURE["STORAGE_BACKEND"] = "mock"  # noqa: F405
INFRASTRUCTURE["EMAIL_BACKEND_TYPE"] = "mock"  # noqa: F405
INFRASTRUCTURE["PAYMENT_PROVIDER"] = "mock"  # noqa: F405

RAZORPAY_KEY_ID = "rzp_test_mock_key"
RAZORPAY_KEY_SECRET = "mock_razorpay_secret"
STRIPE_SECRET_KEY = "sk_test_mock_key"

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
ADMIN_NOTIFICATION_EMAIL = "admin-alerts@lmart.test"
FRONTEND_URL = "http://frontend.test"

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"

OTEL_TRACING_ENABLED = False

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

LOGGING["root"]["level"] = "WARNING"  # noqa: F405

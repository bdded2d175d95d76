"""
Infrastructure Package
======================

Adapters for the services L-Mart talks to, each behind an interface with an
in-memory implementation for tests.

Modules:
    - storage: Uploaded media (S3, local filesystem, mock)
    - email: Transactional email (SMTP, mock)
    - payments: Checkout gateway (Razorpay, Stripe, mock)
    - observability: OpenTelemetry tracing
    - container: Service locator wiring adapters into domain services
"""

"""Keeps customer email addresses out of log lines."""


def mask_email(value: str) -> str:
    name, _, domain = value.partition("@")
    return f"{name[:2]}***@{domain}" if name else f"***@{domain}"

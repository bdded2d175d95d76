from .response_serializers import ErrorResponseSerializer, MessageResponseSerializer

__all__ = ["ErrorResponseSerializer", "MessageResponseSerializer"]

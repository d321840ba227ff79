"""Placeholder service returning a static greeting."""

DEFAULT_APPLICATION_NAME = "MAK Service"


class GreetingService:
    """Service responsible for the greeting message."""

    def __init__(self, application_name: str = DEFAULT_APPLICATION_NAME) -> None:
        self._message = f"Hello from {application_name or DEFAULT_APPLICATION_NAME}"

    def get_message(self) -> str:
        return self._message

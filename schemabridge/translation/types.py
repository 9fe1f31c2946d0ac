"""Shared translation constants."""

CHAT_TO_RESPONSE = "chat_to_response"
RESPONSE_TO_CHAT = "response_to_chat"

SCHEMA_CHAT = "chat"
SCHEMA_RESPONSE = "response"

MODE_TRANSLATE = "translate"

KNOWN_MESSAGE_ROLES: tuple[str, ...] = ("system", "user", "assistant", "developer", "tool")

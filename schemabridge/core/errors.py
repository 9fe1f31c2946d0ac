"""Project error hierarchy."""


class SchemaBridgeError(Exception):
    """Base error."""


class TranslatorContractError(SchemaBridgeError):
    """Raised when a translator returns something other than a TranslationResult."""


class UnknownDirectionError(SchemaBridgeError):
    """Raised when no translator is registered for a direction tag."""


class RoundTripCaseError(SchemaBridgeError):
    """Raised when a round-trip case file cannot be used."""

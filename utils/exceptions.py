class TokenMetadataParseError(ValueError):
    """Raised when no decode strategy could parse a token metadata call result."""


class TokenSymbolParseError(TokenMetadataParseError):
    def __init__(self, message: str = "Failed to parse token symbol"):
        super().__init__(message)


class TokenNameParseError(TokenMetadataParseError):
    def __init__(self, message: str = "Failed to parse token name"):
        super().__init__(message)

"""Exception hierarchy for Facesmith."""


class FacesmithError(Exception):
    """Base exception for all Facesmith errors."""

    pass


class ConfigurationError(FacesmithError):
    """Errors raised while loading startup resources."""

    pass


class FontLibraryError(ConfigurationError):
    """Error reading the font library directory."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font library '{path}': {reason}")


class MetadataError(ConfigurationError):
    """Invalid or unreadable family metadata file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid metadata file '{path}': {reason}")


class WhitelistError(ConfigurationError):
    """Invalid or unreadable whitelist file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read whitelist '{path}': {reason}")


class TemplateLoadError(ConfigurationError):
    """Stylesheet template missing or invalid."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to load template '{name}': {reason}")


class RequestError(FacesmithError):
    """A request that ends with an HTTP error status.

    Subclasses fix the status code. The reason is logged but never sent
    to the client.
    """

    status_code: int = 500

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class MethodNotSupported(RequestError):
    """Request method other than GET."""

    status_code = 501

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method '{method}' not supported")


class RefererRejected(RequestError):
    """Referrer is not in the whitelist."""

    status_code = 403

    def __init__(self, referer: str) -> None:
        self.referer = referer
        super().__init__(f"Referer '{referer}' not whitelisted")


class MissingFamily(RequestError):
    """The family parameter is absent or empty."""

    status_code = 400

    def __init__(self) -> None:
        super().__init__("Missing family parameter")


class UnknownFormat(RequestError):
    """The format parameter names an unsupported font format."""

    status_code = 400

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown font format '{value}'")


class EmptyQuery(RequestError):
    """The family specification yields no lookups."""

    status_code = 400

    def __init__(self, family: str) -> None:
        self.family = family
        super().__init__(f"No fonts requested by '{family}'")


class FontNotFound(RequestError):
    """A requested font is not in the index."""

    status_code = 400

    def __init__(self, family: str, column_key: str) -> None:
        self.family = family
        self.column_key = column_key
        super().__init__(f"Font '{family}' ({column_key}) not found")


class RenderFailure(RequestError):
    """Font contents could not be read or the template failed."""

    status_code = 500

    def __init__(self, reason: str) -> None:
        super().__init__(f"Stylesheet rendering failed: {reason}")


class FingerprintUnavailable(FacesmithError):
    """Entity tag could not be computed for the resolved fonts.

    Never surfaced to the client; the request proceeds without a
    not-modified short-circuit.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Entity tag unavailable: {reason}")

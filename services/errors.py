class AdEngineError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def to_dict(self):
        return {"error": str(self)}


class RequestValidationError(AdEngineError):
    status_code = 400


class ConfigurationError(AdEngineError):
    status_code = 500


class AdParseError(AdEngineError):
    """The completion response could not be parsed into a list of ads."""

    status_code = 502

    def __init__(self, raw, message="Invalid JSON from the completion API."):
        super().__init__(message)
        self.raw = raw

    def to_dict(self):
        return {"error": str(self), "raw": self.raw}


class InsufficientAdsError(AdEngineError):
    """Fewer valid ads than required; carries the ones that survived."""

    status_code = 502

    def __init__(self, items, message="Too few ads were returned."):
        super().__init__(message)
        self.items = items

    def to_dict(self):
        return {"error": str(self), "items": [item.to_dict() for item in self.items]}

class RatesException(Exception):
    pass


class ProviderError(RatesException):
    pass


class TransportFailure(ProviderError):
    pass


class UnexpectedStatus(ProviderError):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(ProviderError):
    pass


class MissingCurrencyData(ProviderError):
    pass


class AllProvidersFailed(ProviderError):
    """Raised when every provider in the fallback chain has failed.

    ``errors`` maps provider name to the message it failed with.
    """

    def __init__(self, message: str, errors: dict[str, str]):
        super().__init__(message)
        self.errors = errors


class RateNormalizationError(RatesException):
    pass


class GeneratorError(RatesException):
    pass


class GeneratorUnavailable(GeneratorError):
    pass


class GeneratorEmptyResponse(GeneratorError):
    pass


class GeneratorRequestFailed(GeneratorError):
    pass

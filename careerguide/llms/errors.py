# =============================================================================
# careerguide/llms/errors.py — Provider error taxonomy
# =============================================================================
# ProviderUnavailable: no credential / base URL, skipped without noise.
# ProviderCallFailed: network, non-2xx, malformed payload, rate limit, empty.
# "All providers exhausted" is not an error; the router answers with the
# keyword fallback instead.
# =============================================================================


class ProviderError(Exception):
    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


class ProviderUnavailable(ProviderError):
    pass


class ProviderCallFailed(ProviderError):
    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        super().__init__(provider, message)
        self.status_code = status_code

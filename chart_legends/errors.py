class LegendError(Exception):
    """Base class for every error raised by chart_legends."""


class LegendNotFoundError(LegendError, LookupError):
    def __init__(self, kind: str, message: str | None = None):
        self.kind = kind
        super().__init__(message or f"No legend registered for chart kind '{kind}'")


class ExplanationNotFoundError(LegendNotFoundError):
    def __init__(self, kind: str):
        super().__init__(kind, f"No explanation available for chart kind '{kind}'")


class InvalidLegendError(LegendError, ValueError):
    pass


class InvalidLegendRequest(LegendError, ValueError):
    pass

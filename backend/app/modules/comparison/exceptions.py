class ComparisonError(Exception):
    """Base class for every failure of a document comparison."""


class DocumentReadError(ComparisonError):
    pass


class UpstreamUnavailableError(ComparisonError):
    pass


class UpstreamResponseError(ComparisonError):
    pass


class ResponseParseError(ComparisonError):
    pass


class ResponseFormatError(ComparisonError):
    pass

"""Exception hierarchy for engrave."""


class EngraveError(Exception):
    """Base exception for all engrave errors."""

    pass


class FontError(EngraveError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading or parsing a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class ConfigurationError(EngraveError):
    """Invalid or unusable render parameter."""

    def __init__(self, parameter: str, reason: str) -> None:
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid value for '{parameter}': {reason}")


class ExportError(EngraveError):
    """Errors related to writing export files."""

    pass


class ExportWriteError(ExportError):
    """Error writing an SVG or DXF file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")

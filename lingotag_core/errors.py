"""Fatal, user-facing errors. Anything raised from here aborts the run with a non-zero exit."""


class LingotagError(Exception):
    pass


class UnsupportedLanguageCode(LingotagError, ValueError):
    def __init__(self, code: str):
        super().__init__(f"Unsupported ISO 639-1 language code: {code!r}")
        self.code = code


class InvalidDetectorConfig(LingotagError, ValueError):
    pass


class IncompatibleModes(LingotagError, ValueError):
    pass


class InvalidEncoding(LingotagError, ValueError):
    def __init__(self, cause: UnicodeDecodeError):
        super().__init__(f"Input should be valid UTF-8: {cause}")
        self.cause = cause

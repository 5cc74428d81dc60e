class SnippetError(Exception):
    pass


class DocumentLoadError(SnippetError):
    """The document could not be opened, read or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = path
        self.reason = reason


class EmptyQueryError(SnippetError):
    pass

class UXLinkError(Exception):
    """Base class for extraction errors."""


class EmptySelection(UXLinkError):
    """Nothing is selected; surfaced to the user as a notice, no tree is built."""

    def __init__(self, message: str = "No selection found"):
        super().__init__(message)


class FontLoadFailure(UXLinkError):
    def __init__(self, node_id: str, cause: BaseException):
        super().__init__(f"could not load font for node {node_id}: {cause}")
        self.node_id = node_id
        self.cause = cause


class StyleSampleFailure(UXLinkError):
    def __init__(self, node_id: str, index: int, cause: BaseException):
        super().__init__(f"could not read style of character {index} in node {node_id}: {cause}")
        self.node_id = node_id
        self.index = index
        self.cause = cause


class FlattenFailure(UXLinkError):
    def __init__(self, node_id: str, cause: BaseException):
        super().__init__(f"could not flatten boolean node {node_id}: {cause}")
        self.node_id = node_id
        self.cause = cause


class NodeExtractionError(UXLinkError):
    """An unanticipated failure while serializing one node."""

    def __init__(self, node_id: str, cause: BaseException):
        super().__init__(f"extraction failed for node {node_id}: {cause}")
        self.node_id = node_id
        self.cause = cause

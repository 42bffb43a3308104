class StoreError(Exception):
    """Base class for everything a collection store can raise."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(StoreError):
    """Client supplied missing, malformed or out-of-range data."""

    status_code = 400


class MalformedRequestError(ValidationError):
    """Request body could not be read as a JSON object."""

    def __init__(self, message: str = "Invalid JSON data"):
        super().__init__(message)


class NotFoundError(StoreError):
    status_code = 404


class UnsupportedOperationError(StoreError):
    status_code = 405


class StorageCorruptError(StoreError):
    """Backing resource exists but its content is not a JSON array."""

    status_code = 500

    def __init__(self, collection: str, detail: str = ""):
        super().__init__(f"Storage for '{collection}' is corrupt" + (f": {detail}" if detail else ""))
        self.collection = collection

    def to_dict(self) -> dict:
        # file paths and parser detail stay in the log
        return {"error": "Storage is corrupt."}

class ServiceError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ClientNotInitializedError(ServiceError):
    def __init__(self, message: str = "Table client not initialized"):
        super().__init__(message)


class TableClientError(ServiceError):
    """Raised by the HTTP table client on transport or HTTP-level failure."""


class RemoteOperationError(ServiceError):
    """The remote store answered with ``success: false``."""


class RecordNotFoundError(ServiceError):
    def __init__(self, entity: str, record_id: int | str | None = None):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found", status_code=404)


class MissingFieldsError(ServiceError):
    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


class BatchOperationError(ServiceError):
    def __init__(self, message: str, failures: list[str] | None = None):
        self.failures = failures or []
        super().__init__(message)


class AuthNotSupportedError(ServiceError):
    pass


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")

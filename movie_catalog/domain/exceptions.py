class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class AlreadyExistsError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


class RemoteCallError(DomainError):
    pass


class BackendUnavailableError(RemoteCallError):
    pass


class ConfigurationError(DomainError):
    pass

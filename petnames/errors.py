class PetNameError(RuntimeError):
    """Base class for every error raised while generating pet names."""


class InputError(PetNameError):
    """Raised by callers when the animal type is empty after trimming."""


class ConfigurationError(PetNameError):
    """Raised when the API key is missing from the environment."""


class ServiceError(PetNameError):
    """Raised when the call to the generative-text service fails."""


class CredentialError(ServiceError):
    """Raised when the service reports that the requested entity was not found."""


class ParseError(PetNameError):
    """Raised when the reply is not valid JSON."""


class ValidationError(PetNameError):
    """Raised when the reply is valid JSON but does not match the names schema."""

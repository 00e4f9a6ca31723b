"""Pet name generator backed by Gemini through LangChain."""

from .errors import (
    ConfigurationError,
    CredentialError,
    InputError,
    ParseError,
    PetNameError,
    ServiceError,
    ValidationError,
)
from .langchain_helper import agenerate_pet_names, generate_pet_names

__all__ = [
    "ConfigurationError",
    "CredentialError",
    "InputError",
    "ParseError",
    "PetNameError",
    "ServiceError",
    "ValidationError",
    "agenerate_pet_names",
    "generate_pet_names",
]

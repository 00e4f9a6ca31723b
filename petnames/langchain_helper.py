import logging
from typing import Any, Dict, List

from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI

from petnames import config
from petnames.errors import ConfigurationError, CredentialError, ServiceError
from petnames.interpreter import interpret
from petnames.prompt import GenerationRequest, build_request

logger = logging.getLogger(__name__)

ENTITY_NOT_FOUND = "Requested entity was not found."
CREDENTIAL_HINT = (
    "API key might be invalid or project not configured correctly. "
    "Please check your API key and project settings. "
    "Billing information: ai.google.dev/gemini-api/docs/billing"
)


def _build_llm(api_key: str, schema: Dict[str, Any]):
    return ChatGoogleGenerativeAI(
        model=config.MODEL_NAME,
        google_api_key=api_key,
        temperature=config.TEMPERATURE,
        response_mime_type="application/json",
        response_schema=schema,
    )


def _require_api_key() -> str:
    api_key = config.get_api_key()
    if not api_key:
        raise ConfigurationError(
            f"{config.API_KEY_ENV} is not defined in environment variables."
        )
    return api_key


def _build_chain(api_key: str, request: GenerationRequest):
    # New client on every call so a changed API key is used right away
    llm = _build_llm(api_key, request.schema)
    return llm | StrOutputParser()


def _translate_error(error: Exception) -> ServiceError:
    message = str(error) or "Unknown error"
    if ENTITY_NOT_FOUND in message:
        return CredentialError(CREDENTIAL_HINT)
    return ServiceError(f"Failed to generate pet names: {message}")


def invoke(request: GenerationRequest) -> str:
    """Send one request to Gemini and return the raw reply text."""
    api_key = _require_api_key()
    logger.debug("Prompt: %s", request.prompt)
    try:
        chain = _build_chain(api_key, request)
        reply = chain.invoke(request.prompt)
    except Exception as e:
        logger.error("Error generating pet names: %s", e)
        raise _translate_error(e) from e
    logger.debug("Raw model reply: %s", reply)
    return reply


async def ainvoke(request: GenerationRequest) -> str:
    api_key = _require_api_key()
    logger.debug("Prompt: %s", request.prompt)
    try:
        chain = _build_chain(api_key, request)
        reply = await chain.ainvoke(request.prompt)
    except Exception as e:
        logger.error("Error generating pet names: %s", e)
        raise _translate_error(e) from e
    logger.debug("Raw model reply: %s", reply)
    return reply


def generate_pet_names(animal_type: str) -> List[str]:
    """Ask Gemini for pet names suited to ``animal_type``.

    ``animal_type`` must already be non-blank (see prompt.validate_animal_type).
    Raises ConfigurationError, ServiceError/CredentialError, ParseError or
    ValidationError; nothing is retried.
    """
    names = interpret(invoke(build_request(animal_type)))
    logger.info("Generated %d names for %s", len(names), animal_type)
    return names


async def agenerate_pet_names(animal_type: str) -> List[str]:
    names = interpret(await ainvoke(build_request(animal_type)))
    logger.info("Generated %d names for %s", len(names), animal_type)
    return names


if __name__ == '__main__':
    print(generate_pet_names('犬'))

import copy
from dataclasses import dataclass
from typing import Any, Dict

from langchain_core.prompts import PromptTemplate

from petnames import config
from petnames.errors import InputError

PET_NAME_TEMPLATE = (
    'Generate {count} unique pet names for a "{animal_type}". '
    "The names should be in Katakana (e.g., キュート, ミミ), easy to pronounce in Japanese, "
    "and suitable for the specified animal. "
    'Return the names as a JSON object with a single key "names" which is an array of strings.'
)

NAMES_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "names": {
            "type": "array",
            "items": {
                "type": "string",
                "description": "A pet name in Katakana.",
            },
            "description": "An array of suitable pet names in Katakana.",
        },
    },
    "required": ["names"],
}

prompt_template_name = PromptTemplate(
    input_variables=["count", "animal_type"],
    template=PET_NAME_TEMPLATE,
)


@dataclass(frozen=True)
class GenerationRequest:
    prompt: str
    schema: Dict[str, Any]


def validate_animal_type(animal_type: str) -> str:
    """Return the trimmed animal type, or raise InputError when it is blank."""
    cleaned = (animal_type or "").strip()
    if not cleaned:
        raise InputError("動物の種類を入力してください。")
    return cleaned


def build_request(animal_type: str) -> GenerationRequest:
    """Build the prompt and output schema for one pet name request.

    The caller must pass a non-blank animal type (see validate_animal_type);
    it is embedded as given.
    """
    prompt = prompt_template_name.format(
        count=config.NAME_COUNT, animal_type=animal_type
    )
    return GenerationRequest(prompt=prompt, schema=copy.deepcopy(NAMES_SCHEMA))

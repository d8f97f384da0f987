"""Mnemonic password generator — builds passwords from personal facts.

Nothing here is random: the same facts and style always yield the same
password. That is the point of a mnemonic, and also why the output must
not be treated as a secure secret.
"""

from __future__ import annotations

import logging

from pass_audit.core.checker import analyze
from pass_audit.core.config import AuditConfig
from pass_audit.model import PasswordStyle
from pass_audit.model.facts import InputValidationError, PersonalFacts
from pass_audit.model.result import GeneratedPassword

_logger = logging.getLogger(__name__)

_LEET_MAP = {
    "a": "4", "A": "4",
    "e": "3", "E": "3",
    "i": "1", "I": "1",
    "o": "0", "O": "0",
    "s": "5", "S": "5",
    "t": "7", "T": "7",
}

STYLE_LABELS: dict[PasswordStyle, str] = {
    PasswordStyle.CAMEL_CASE: "CamelCase",
    PasswordStyle.UNDERSCORE: "Underscore",
    PasswordStyle.SYMBOLS: "With Symbols",
    PasswordStyle.LEETSPEAK: "Leet Speak",
}

# Styles shown by generate_variations, in display order.
VARIATION_STYLES: tuple[PasswordStyle, ...] = (
    PasswordStyle.CAMEL_CASE,
    PasswordStyle.SYMBOLS,
    PasswordStyle.LEETSPEAK,
)

_FIELD_NAMES = ("Pet/Animal name", "Birth year", "Favorite color", "Lucky number")


def validate_inputs(
    pet: str,
    year: str,
    color: str,
    number: str,
    *,
    min_year: int = 1900,
    max_year: int = 2024,
) -> None:
    """Check that all four facts are present and the year is in range.

    Raises
    ------
    InputValidationError
        Listing every missing field, or describing the allowed year range.
    """
    missing = [
        name for name, value in zip(_FIELD_NAMES, (pet, year, color, number)) if not value
    ]
    if missing:
        raise InputValidationError(
            f"Please fill in the following fields: {', '.join(missing)}",
            missing_fields=missing,
        )

    range_error = f"Please enter a valid birth year between {min_year} and {max_year}"
    try:
        year_value = int(str(year).strip())
    except ValueError:
        raise InputValidationError(range_error) from None
    if year_value < min_year or year_value > max_year:
        raise InputValidationError(range_error)


def capitalize_first(text: str) -> str:
    """Upper-case the first character, lower-case the rest."""
    return text[:1].upper() + text[1:].lower()


def to_leet_speak(text: str) -> str:
    """Swap a/e/i/o/s/t (either case) for 4/3/1/0/5/7."""
    return "".join(_LEET_MAP.get(ch, ch) for ch in text)


def create_password(facts: PersonalFacts, style: PasswordStyle | str) -> str:
    """Lay out *facts* according to *style*; unknown styles mean camelCase."""
    pet, color = facts.pet, facts.color
    year, number = facts.birth_year, facts.lucky_number
    style = PasswordStyle.parse(style)

    if style == PasswordStyle.UNDERSCORE:
        return f"{pet.lower()}_{color.lower()}_{year}_{number}"
    if style == PasswordStyle.SYMBOLS:
        return f"{capitalize_first(pet)}@{capitalize_first(color)}#{year}!{number}"
    if style == PasswordStyle.LEETSPEAK:
        leet_pet = capitalize_first(to_leet_speak(pet))
        leet_color = capitalize_first(to_leet_speak(color))
        return f"{leet_pet}_{leet_color}_{year}!{number}"
    return f"{capitalize_first(pet)}{capitalize_first(color)}{year}{number}"


def _validated(facts: PersonalFacts, config: AuditConfig) -> None:
    validate_inputs(
        facts.pet,
        facts.birth_year,
        facts.color,
        facts.lucky_number,
        min_year=config.min_birth_year,
        max_year=config.max_birth_year,
    )


def generate_password(
    facts: PersonalFacts,
    style: PasswordStyle | str | None = None,
    *,
    config: AuditConfig | None = None,
) -> GeneratedPassword:
    """Validate *facts*, build one password and analyse it."""
    cfg = config or AuditConfig()
    _validated(facts, cfg)
    resolved = PasswordStyle.parse(style) if style is not None else cfg.style
    password = create_password(facts, resolved)
    _logger.debug("Generated %s password (%d chars)", resolved.value, len(password))
    return GeneratedPassword(
        label=STYLE_LABELS[resolved],
        password=password,
        analysis=analyze(password, config=cfg),
    )


def generate_variations(
    facts: PersonalFacts,
    *,
    config: AuditConfig | None = None,
) -> list[GeneratedPassword]:
    """Validate *facts* and build the camelCase, symbols and leetspeak variants."""
    cfg = config or AuditConfig()
    _validated(facts, cfg)
    variations = []
    for style in VARIATION_STYLES:
        password = create_password(facts, style)
        variations.append(
            GeneratedPassword(
                label=STYLE_LABELS[style],
                password=password,
                analysis=analyze(password, config=cfg),
            )
        )
    _logger.debug("Generated %d variations", len(variations))
    return variations

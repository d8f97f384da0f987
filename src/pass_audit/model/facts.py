"""Personal facts a mnemonic password is built from."""

from __future__ import annotations

from dataclasses import dataclass


class InputValidationError(ValueError):
    """Raised when user input is missing or out of range.

    ``missing_fields`` lists the human-readable names of empty inputs,
    in form order. It is empty for range errors.
    """

    def __init__(self, message: str, *, missing_fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing_fields: list[str] = list(missing_fields or [])


@dataclass(frozen=True, slots=True)
class PersonalFacts:
    """The four inputs of the generator.

    ``pet`` and ``color`` are trimmed. ``birth_year`` and ``lucky_number``
    are kept exactly as typed; they are concatenated verbatim.
    """

    pet: str
    birth_year: str
    color: str
    lucky_number: str

    @classmethod
    def from_raw(
        cls,
        pet: object,
        birth_year: object,
        color: object,
        lucky_number: object,
    ) -> "PersonalFacts":
        def _text(v: object) -> str:
            return "" if v is None else str(v)

        return cls(
            pet=_text(pet).strip(),
            birth_year=_text(birth_year),
            color=_text(color).strip(),
            lucky_number=_text(lucky_number),
        )


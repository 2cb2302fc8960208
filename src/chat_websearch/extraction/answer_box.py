"""Typed views over the provider's ``answer_box`` payload.

The provider tags the direct-answer block with a ``type`` discriminator. Each
known tag maps to one model exposing ``fragments()``; anything else falls back
to ``UnknownAnswer`` so parsing never fails on new or malformed tags.
"""

from __future__ import annotations

from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field


def first_truthy(*values: Any) -> Any:
    for value in values:
        if value:
            return value
    return None


def as_fragment(value: Any) -> str | None:
    """Coerce a scalar payload value into fragment text; containers are rejected."""
    if not value or isinstance(value, (dict, list, tuple)):
        return None
    return value if isinstance(value, str) else str(value)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(_cell(item) for item in value)
    return str(value)


def join_lines(value: Any) -> str | None:
    if isinstance(value, str):
        return value or None
    if not isinstance(value, (list, tuple)):
        return None
    return "\n".join(_cell(item) for item in value) or None


def join_fields(*values: Any) -> str | None:
    # Missing fields are left out rather than rendered as placeholders.
    parts = [_cell(value) for value in values if value is not None and value != ""]
    return " ".join(parts) or None


class AnswerBox(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    kind: ClassVar[str] = ""

    type: Any = None

    def fragments(self) -> list[str]:
        raise NotImplementedError


class OrganicAnswer(AnswerBox):
    kind: ClassVar[str] = "organic_result"

    snippet: Any = None
    result: Any = None
    title: Any = None
    items: Any = Field(default=None, alias="list")
    table: Any = None

    def fragments(self) -> list[str]:
        out = [as_fragment(first_truthy(self.snippet, self.result, self.title))]
        if self.items:
            out.append(join_lines(self.items))
        if self.table:
            out.append(join_lines(self.table))
        return [fragment for fragment in out if fragment]


class TranslationAnswer(AnswerBox):
    kind: ClassVar[str] = "translation_result"

    translation: Any = None

    def fragments(self) -> list[str]:
        target = self.translation.get("target") if isinstance(self.translation, dict) else None
        text = target.get("text") if isinstance(target, dict) else None
        fragment = as_fragment(text)
        return [fragment] if fragment else []


class ResultAnswer(AnswerBox):
    """Answers whose whole content is the ``result`` field."""

    result: Any = None

    def fragments(self) -> list[str]:
        fragment = as_fragment(self.result)
        return [fragment] if fragment else []


class CalculatorAnswer(ResultAnswer):
    kind: ClassVar[str] = "calculator_result"


class CurrencyAnswer(ResultAnswer):
    kind: ClassVar[str] = "currency_converter"


class PopulationAnswer(AnswerBox):
    kind: ClassVar[str] = "population_result"

    place: Any = None
    population: Any = None

    def fragments(self) -> list[str]:
        fragment = join_fields(self.place, self.population)
        return [fragment] if fragment else []


class FinanceAnswer(AnswerBox):
    kind: ClassVar[str] = "finance_results"

    title: Any = None
    exchange: Any = None
    stock: Any = None
    price: Any = None
    currency: Any = None

    def fragments(self) -> list[str]:
        fragment = join_fields(
            self.title, self.exchange, self.stock, self.price, self.currency
        )
        return [fragment] if fragment else []


class WeatherAnswer(AnswerBox):
    kind: ClassVar[str] = "weather_result"

    location: Any = None
    weather: Any = None
    temperature: Any = None
    unit: Any = None

    def fragments(self) -> list[str]:
        fragment = join_fields(self.location, self.weather, self.temperature, self.unit)
        return [fragment] if fragment else []


class FlightDurationAnswer(AnswerBox):
    kind: ClassVar[str] = "flight_duration"

    duration: Any = None

    def fragments(self) -> list[str]:
        fragment = as_fragment(self.duration)
        return [fragment] if fragment else []


class DictionaryAnswer(AnswerBox):
    kind: ClassVar[str] = "dictionary_results"

    definitions: Any = None

    def fragments(self) -> list[str]:
        fragment = join_lines(self.definitions)
        return [fragment] if fragment else []


class TimeAnswer(AnswerBox):
    kind: ClassVar[str] = "time"

    result: Any = None
    date: Any = None

    def fragments(self) -> list[str]:
        fragment = join_fields(self.result, self.date)
        return [fragment] if fragment else []


class UnknownAnswer(AnswerBox):
    result: Any = None
    answer: Any = None
    title: Any = None

    def fragments(self) -> list[str]:
        fragment = as_fragment(first_truthy(self.result, self.answer, self.title))
        return [fragment] if fragment else []


AnswerBoxVariant = Union[
    OrganicAnswer,
    TranslationAnswer,
    CalculatorAnswer,
    CurrencyAnswer,
    PopulationAnswer,
    FinanceAnswer,
    WeatherAnswer,
    FlightDurationAnswer,
    DictionaryAnswer,
    TimeAnswer,
    UnknownAnswer,
]

ANSWER_BOX_TYPES: dict[str, type[AnswerBox]] = {
    model.kind: model
    for model in (
        OrganicAnswer,
        TranslationAnswer,
        CalculatorAnswer,
        CurrencyAnswer,
        PopulationAnswer,
        FinanceAnswer,
        WeatherAnswer,
        FlightDurationAnswer,
        DictionaryAnswer,
        TimeAnswer,
    )
}


def parse_answer_box(raw: Any) -> AnswerBoxVariant | None:
    if not isinstance(raw, dict):
        return None
    tag = raw.get("type")
    model = ANSWER_BOX_TYPES.get(tag, UnknownAnswer) if isinstance(tag, str) else UnknownAnswer
    return model.model_validate(raw)

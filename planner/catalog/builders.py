"""Shorthand constructors for catalog literals."""

from typing import Iterable, Optional, Tuple

from ..logic.contracts import PlanField, PlanOption


def select_field(label: str, key: str, options: Iterable[Tuple[str, str]], required: bool = True) -> PlanField:
    return PlanField(
        type="select",
        label=label,
        key=key,
        required=required,
        options=tuple(PlanOption(value=value, label=text) for value, text in options),
    )


def input_field(
    label: str,
    key: str,
    *,
    required: bool = True,
    input_type: Optional[str] = None,
    min: Optional[int] = None,
    max: Optional[int] = None,
    placeholder: Optional[str] = None,
) -> PlanField:
    return PlanField(
        type="input",
        label=label,
        key=key,
        required=required,
        input_type=input_type,
        min=min,
        max=max,
        placeholder=placeholder,
    )

"""Delimited-string summation with five progressively richer parsing rules."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from string_calculator.base import BaseComponent
from string_calculator.errors import (
    CalculatorError,
    MalformedDelimiterDeclarationError,
    NegativeOperandsError,
    Number,
    TooManyOperandsError,
)
from string_calculator.operands import parse_operands, sum_operands
from string_calculator.tokenizer import split_on_any
from string_calculator.types import AdditionVariant
from string_calculator.utils.settings import get_calculator_settings

if TYPE_CHECKING:
    from string_calculator.utils.settings import CalculatorSettings

LINE_BREAK = "\n"
BOUNDED_OPERAND_LIMIT = 2


@dataclass(frozen=True, slots=True)
class DelimiterSpec:
    """Delimiters active for one call and the text they apply to."""

    delimiters: frozenset[str]
    payload: str


DelimiterResolver = Callable[[str], DelimiterSpec]


@dataclass(frozen=True, slots=True)
class AdditionPolicy:
    """Configuration of the shared summation routine for one variant."""

    variant: AdditionVariant
    resolve: DelimiterResolver
    max_operands: int | None = None
    reject_negatives: bool = False


class StringCalculator(BaseComponent):
    """Sum numbers embedded in delimited strings and count every attempt."""

    def __init__(self, settings: CalculatorSettings | None = None) -> None:
        """Initialize the calculator with a zero invocation count.

        Args:
            settings: Parsing defaults. The global calculator settings are
                used when omitted.

        """
        super().__init__()
        self.settings = settings or get_calculator_settings()
        self._count = 0
        self._count_lock = threading.Lock()
        self._policies: dict[AdditionVariant, AdditionPolicy] = {
            AdditionVariant.V1: AdditionPolicy(
                variant=AdditionVariant.V1,
                resolve=self._fixed_delimiters(","),
                max_operands=BOUNDED_OPERAND_LIMIT,
            ),
            AdditionVariant.V2: AdditionPolicy(
                variant=AdditionVariant.V2,
                resolve=self._fixed_delimiters(","),
            ),
            AdditionVariant.V3: AdditionPolicy(
                variant=AdditionVariant.V3,
                resolve=self._fixed_delimiters(",", LINE_BREAK),
            ),
            AdditionVariant.V4: AdditionPolicy(
                variant=AdditionVariant.V4,
                resolve=self._resolve_declaration,
            ),
            AdditionVariant.V5: AdditionPolicy(
                variant=AdditionVariant.V5,
                resolve=self._resolve_strict_declaration,
                reject_negatives=True,
            ),
        }

    def read_invocation_count(self) -> int:
        """Return how many summation calls this instance has received."""
        return self._count

    def add(
        self,
        text: str | None = None,
        variant: AdditionVariant | str = AdditionVariant.V5,
    ) -> Number:
        """Evaluate ``text`` with the parsing rule named by ``variant``."""
        return self._evaluate(text, self._policies[AdditionVariant(variant)])

    def add_v1(self, text: str | None = None) -> Number:
        """Add up to two comma-separated numbers.

        Raises:
            TooManyOperandsError: If more than two numbers are given.
            NonNumericOperandError: If any operand is not a number.

        """
        return self._evaluate(text, self._policies[AdditionVariant.V1])

    def add_v2(self, text: str | None = None) -> Number:
        """Add any amount of comma-separated numbers."""
        return self._evaluate(text, self._policies[AdditionVariant.V2])

    def add_v3(self, text: str | None = None) -> Number:
        """Add numbers separated by commas, newlines, or a mix of both."""
        return self._evaluate(text, self._policies[AdditionVariant.V3])

    def add_v4(self, text: str | None = None) -> Number:
        """Add numbers using an optional ``//<delimiter>\\n`` declaration.

        Without a declaration the default delimiter (``;``) applies. Only the
        active delimiter splits the payload; commas and newlines do not.

        Raises:
            MalformedDelimiterDeclarationError: If the declaration has no line
                break after it.
            NonNumericOperandError: If any operand is not a number.

        """
        return self._evaluate(text, self._policies[AdditionVariant.V4])

    def add_v5(self, text: str | None = None) -> Number:
        """Add numbers like :meth:`add_v4`, rejecting negative operands.

        Raises:
            MalformedDelimiterDeclarationError: If nothing follows the
                declaration line.
            NonNumericOperandError: If any operand is not a number.
            NegativeOperandsError: Listing every negative operand in order.

        """
        return self._evaluate(text, self._policies[AdditionVariant.V5])

    def _increment(self) -> int:
        with self._count_lock:
            self._count += 1
            return self._count

    def _evaluate(self, text: str | None, policy: AdditionPolicy) -> Number:
        """Run the shared tokenize, validate, convert and reduce pipeline."""
        invocation = self._increment()
        self.logger.debug(
            "Evaluating input",
            variant=policy.variant.value,
            invocation=invocation,
        )

        if text is None or not text.strip():
            return 0

        try:
            spec = policy.resolve(text)
            tokens = split_on_any(spec.payload, spec.delimiters)
            if policy.max_operands is not None and len(tokens) > policy.max_operands:
                raise TooManyOperandsError
            values = parse_operands(tokens)
            if policy.reject_negatives:
                negatives = [value for value in values if value < 0]
                if negatives:
                    raise NegativeOperandsError(negatives)
        except CalculatorError as exc:
            self.logger.warning(
                "Input rejected",
                variant=policy.variant.value,
                kind=exc.kind.value,
                error=str(exc),
            )
            raise

        return sum_operands(values)

    @staticmethod
    def _fixed_delimiters(*delimiters: str) -> DelimiterResolver:
        """Build a resolver that always splits the whole input on ``delimiters``."""
        active = frozenset(delimiters)

        def resolve(text: str) -> DelimiterSpec:
            return DelimiterSpec(delimiters=active, payload=text)

        return resolve

    def _split_declaration(self, text: str) -> tuple[str, str | None]:
        """Separate a declared delimiter from its payload.

        The payload is ``None`` when the input has no line break at all.
        Only the line after the declaration is read; later lines are ignored.
        """
        marker = self.settings.declaration_marker
        declaration, line_break, remainder = text.partition(LINE_BREAK)
        delimiter = declaration[len(marker) :] or self.settings.default_delimiter
        if not line_break:
            return delimiter, None
        return delimiter, remainder.partition(LINE_BREAK)[0]

    def _resolve_declaration(self, text: str) -> DelimiterSpec:
        if not text.startswith(self.settings.declaration_marker):
            return DelimiterSpec(
                delimiters=frozenset({self.settings.default_delimiter}),
                payload=text,
            )

        delimiter, payload = self._split_declaration(text)
        if payload is None:
            raise MalformedDelimiterDeclarationError
        return DelimiterSpec(delimiters=frozenset({delimiter}), payload=payload)

    def _resolve_strict_declaration(self, text: str) -> DelimiterSpec:
        if not text.startswith(self.settings.declaration_marker):
            return DelimiterSpec(
                delimiters=frozenset({self.settings.default_delimiter}),
                payload=text,
            )

        delimiter, payload = self._split_declaration(text)
        # An absent payload counts as empty here.
        if not payload:
            raise MalformedDelimiterDeclarationError
        return DelimiterSpec(delimiters=frozenset({delimiter}), payload=payload)


__all__ = [
    "AdditionPolicy",
    "DelimiterSpec",
    "StringCalculator",
]

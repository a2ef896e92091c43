"""Input/output models for the string calculator interfaces."""

from pydantic import BaseModel, ConfigDict, Field

from string_calculator.types import AdditionVariant


class WelcomeMessage(BaseModel):
    """Greeting shown when the CLI is started without a command."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(
        default="Welcome to String Calculator!",
        description="Welcome message text",
    )
    hint: str = Field(
        default="Type --help for more information",
        description="Hint for getting help",
    )


class CalculationResult(BaseModel):
    """Outcome of one successful summation call."""

    model_config = ConfigDict(frozen=True)

    variant: AdditionVariant = Field(description="Parsing rule that was applied")
    text: str | None = Field(description="Raw input as received")
    total: int | float = Field(description="Sum of all operands")
    invocation_count: int = Field(
        ge=0,
        description="Invocation count of the calculator after the call",
    )

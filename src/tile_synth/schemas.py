"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field

from tile_synth.parameters import Parameter


class ParameterState(BaseModel):
    """Current state of a runtime parameter."""

    name: str
    label: str
    minimum: int
    maximum: int
    step: int
    default: int
    value: int

    @classmethod
    def from_parameter(cls, parameter: Parameter) -> "ParameterState":
        return cls(
            name=parameter.name,
            label=parameter.label,
            minimum=parameter.minimum,
            maximum=parameter.maximum,
            step=parameter.step,
            default=parameter.default,
            value=parameter.value,
        )


class ParameterUpdate(BaseModel):
    """Request model for changing a parameter."""

    value: int = Field(..., description="New parameter value")

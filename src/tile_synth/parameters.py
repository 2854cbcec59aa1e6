"""Runtime-adjustable integer parameters with change callbacks."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Called with (value, initial); initial is True only for the registration pass
ChangeCallback = Callable[[int, bool], None]


@dataclass
class Parameter:
    """An integer parameter constrained to [minimum, maximum] in steps of step."""

    name: str
    label: str
    minimum: int
    maximum: int
    step: int
    default: int
    value: int
    on_change: ChangeCallback | None = None

    def check(self, value: int) -> None:
        if not self.minimum <= value <= self.maximum:
            raise ValueError(
                f"{self.name} must be between {self.minimum} and {self.maximum}, got {value}"
            )
        if (value - self.minimum) % self.step:
            raise ValueError(f"{self.name} must be a multiple of {self.step} from {self.minimum}, got {value}")


class ParameterRegistry:
    """Holds named parameters and notifies their listeners on change."""

    def __init__(self) -> None:
        self._parameters: dict[str, Parameter] = {}

    def register(
        self,
        name: str,
        label: str,
        value_range: tuple[int, int, int],
        default: int,
        on_change: ChangeCallback | None = None,
    ) -> Parameter:
        """Register a parameter and run its callback once with initial=True."""
        if name in self._parameters:
            raise ValueError(f"Parameter {name!r} is already registered")
        minimum, maximum, step = value_range
        if step <= 0 or minimum > maximum:
            raise ValueError(f"Invalid range for {name!r}: {value_range}")
        parameter = Parameter(
            name=name,
            label=label,
            minimum=minimum,
            maximum=maximum,
            step=step,
            default=default,
            value=default,
            on_change=on_change,
        )
        parameter.check(default)
        self._parameters[name] = parameter
        if on_change is not None:
            on_change(default, True)
        return parameter

    def get(self, name: str) -> Parameter:
        try:
            return self._parameters[name]
        except KeyError:
            raise KeyError(f"Unknown parameter: {name}") from None

    def get_value(self, name: str) -> int:
        return self.get(name).value

    def set_value(self, name: str, value: int) -> bool:
        """Update a parameter. Returns True if the value changed."""
        parameter = self.get(name)
        parameter.check(value)
        if value == parameter.value:
            return False
        logger.info("Parameter %s changed: %d -> %d", name, parameter.value, value)
        parameter.value = value
        if parameter.on_change is not None:
            parameter.on_change(value, False)
        return True

    def __iter__(self):
        return iter(self._parameters.values())

    def __contains__(self, name: str) -> bool:
        return name in self._parameters

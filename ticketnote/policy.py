"""Error handling policy for failed ticket lookups."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator

from ticketnote.exceptions import ConfigurationError


class ErrorPolicy(Enum):
    """What to do when no ticket can be read from the branch."""

    ABORT = "abort"
    OMIT = "omit"
    PLACEHOLDER = "placeholder"


class ErrorHandling(BaseModel):
    """Selected error policy, with the placeholder text when one is used."""

    policy: ErrorPolicy = ErrorPolicy.OMIT
    placeholder: Optional[str] = None

    @model_validator(mode="after")
    def placeholder_matches_policy(self) -> "ErrorHandling":
        """Require placeholder text exactly for the placeholder policy."""
        if self.policy is ErrorPolicy.PLACEHOLDER and self.placeholder is None:
            raise ValueError("placeholder policy needs placeholder text")
        if self.policy is not ErrorPolicy.PLACEHOLDER and self.placeholder is not None:
            raise ValueError(f"{self.policy.value} policy doesn't take placeholder text")
        return self

    @classmethod
    def from_flags(
        cls,
        abort: bool = False,
        omit: bool = False,
        placeholder: Optional[str] = None,
    ) -> "ErrorHandling":
        """Build the policy from the command line flags.

        Args:
            abort: Whether --abort was given.
            omit: Whether --omit was given.
            placeholder: The --placeholder text, if given.

        Returns:
            The selected policy. Omit when no flag is set.

        Raises:
            ConfigurationError: If more than one flag is set.
        """
        selected = sum([abort, omit, placeholder is not None])
        if selected > 1:
            raise ConfigurationError("Options --abort, --omit and --placeholder are mutually exclusive")

        if placeholder is not None:
            return cls(policy=ErrorPolicy.PLACEHOLDER, placeholder=placeholder)
        if abort:
            return cls(policy=ErrorPolicy.ABORT)
        return cls(policy=ErrorPolicy.OMIT)

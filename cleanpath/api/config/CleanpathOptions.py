"""Driver options before resolution."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CleanpathOptions(BaseModel):
    """Options collected from the command line."""

    model_config = ConfigDict(extra="forbid")

    read_input: bool = Field(False, description="Read paths from stdin, one per line")
    tilde_expand: bool = Field(False, description="Expand leading tilde")
    tilde_unexpand: bool = Field(False, description="Unexpand leading tilde")
    env_expand: bool = Field(False, description="Expand environment variables")
    env_unexpand: bool = Field(False, description="Unexpand environment variables")
    absolute: bool = Field(False, description="Make paths absolute")
    unabsolute: bool = Field(False, description="Make paths relative")
    old_pattern: str = Field("", description="Regex pattern to replace")
    new_pattern: str = Field("", description="Replacement for old_pattern")
    user: str = Field("", description="User name for tilde transforms")
    base: str = Field(".", description="Base directory for absolute/relative paths")
    parent: str = Field("0", description="Maximum parent traversals, '-' for unlimited")
    env_names: list[str] = Field(default_factory=list, description="Environment variable names, '-' for all")
    verbose: bool = Field(False, description="Print the transform trace to stderr")

    @model_validator(mode="after")
    def _check_combinations(self) -> "CleanpathOptions":
        """Reject mutually exclusive flags and an unpaired -o/-n."""
        if self.tilde_expand and self.tilde_unexpand:
            raise ValueError("cannot use -t and -T together")
        if self.env_expand and self.env_unexpand:
            raise ValueError("cannot use -e and -E together")
        if self.absolute and self.unabsolute:
            raise ValueError("cannot use -a and -A together")
        if self.old_pattern and not self.new_pattern:
            raise ValueError("option -o requires -n")
        if self.new_pattern and not self.old_pattern:
            raise ValueError("option -n requires -o")
        return self

# ==========================================
# CONFIGURATION
# ==========================================
from pydantic import BaseModel, ConfigDict


class CompilerOptions(BaseModel):
    """Per-call options for the compilation pipeline."""

    model_config = ConfigDict(frozen=True)

    # Print a debug trace of every stage to stderr
    verbose: bool = False
    # Accept any token after '(' as the callee, not only a name
    allow_any_callee: bool = False


DEFAULT_OPTIONS = CompilerOptions()


def resolve_options(options=None):
    """Return the options to use for one compile call."""
    return options if options is not None else DEFAULT_OPTIONS

"""
Program state model and pipeline helper

Defines ProgramState dataclass for the command-line stage chain and
the pipeline() helper for composing those stages.
"""

from argparse import Namespace
from typing import Optional, Type, TypeVar, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for a single wp-readme run (state bus pattern).

    Each stage receives a copy of the state and returns it with new fields
    filled in.

    Pipeline stages and their state additions:
        - Initial: targetDir, environment, verbosity
        - readme_locate: readmeFile
        - readme_write: outputFile, convertOK
        - results_report: (no additions, terminal stage)

    Attributes:
        targetDir: Directory searched for README.md / readme.md
        environment: Environment Name for visibility resolution (None = unset)
        verbosity: Logging verbosity level (0-3)
        readmeFile: Located README path ("" until found)
        outputFile: Path of the generated readme.txt
        convertOK: Writer reported success
    """

    # CLI arguments
    targetDir: str = field(default=".")
    environment: Optional[str] = field(default=None)
    verbosity: int = field(default=1)

    # Pipeline state
    readmeFile: str = field(default="")
    outputFile: str = field(default="")
    convertOK: bool = field(default=False)

    @classmethod
    def state_createFromNamespace(cls: Type[PS], options: Namespace) -> PS:
        """
        Create ProgramState from an argparse Namespace.

        Options that have no matching field are ignored.

        Args:
            options: Parsed CLI arguments (targetDir, env, verbosity)

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        # --env is stored as "env" on the namespace
        if "env" in options_dict:
            filtered_options["environment"] = options_dict["env"] or None

        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            readme_locate,
            readme_write,
            results_report
        )

    This is equivalent to:
        results_report(readme_write(readme_locate(initial_state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)

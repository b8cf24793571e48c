"""Define Pydantic models for validating planning problem YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from gps_planner.classical_planning.actions import Action
from gps_planner.classical_planning.planning_problem import PlanningProblem
from gps_planner.io.yaml_utils import load_yaml_data
from gps_planner.planning.achievement import PlannerConfig


class ProblemFileError(ValueError):
    """Raised when a planning problem file cannot be loaded or fails validation."""


class ActionSchema(BaseModel):
    """Schema for a single action in a problem file."""

    name: str = Field(min_length=1, description="Name reported when the action is applied")
    preconditions: List[str] = Field(default_factory=list)
    adds: List[str] = Field(default_factory=list)
    deletes: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_action(self) -> Action:
        """Convert the validated schema into an Action."""
        return Action.from_yaml_data(self.model_dump())


class PlannerConfigSchema(BaseModel):
    """Schema for the optional planner configuration block of a problem file."""

    max_depth: Optional[int] = Field(default=None, ge=1, description="Maximum goal nesting depth")

    model_config = ConfigDict(extra="forbid")


class ProblemSchema(BaseModel):
    """Schema for a complete planning problem file."""

    name: Optional[str] = None
    initial_state: List[str] = Field(default_factory=list)
    goals: List[str]
    actions: List[ActionSchema] = Field(default_factory=list)
    config: Optional[PlannerConfigSchema] = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_goals_nonempty(self) -> ProblemSchema:
        """Verify that the problem specifies at least one goal."""
        if not self.goals:
            raise ValueError("A planning problem must specify at least one goal.")
        return self

    def to_problem(self, default_name: str) -> PlanningProblem:
        """Convert the validated schema into a PlanningProblem.

        :param default_name: Name used if the problem file doesn't specify one
        :return: Constructed PlanningProblem instance
        """
        return PlanningProblem(
            name=self.name or default_name,
            initial_state=tuple(self.initial_state),
            goals=tuple(self.goals),
            actions=tuple(a.to_action() for a in self.actions),
        )

    def to_config(self) -> PlannerConfig:
        """Construct the planner configuration specified by the problem file."""
        if self.config is None or self.config.max_depth is None:
            return PlannerConfig()
        return PlannerConfig(max_depth=self.config.max_depth)


def load_problem(yaml_path: Path) -> tuple[PlanningProblem, PlannerConfig]:
    """Load and validate a planning problem from a YAML file.

    :param yaml_path: Path to the problem YAML file
    :return: Tuple containing the imported problem and its planner configuration
    :raises FileNotFoundError: If the YAML file doesn't exist
    :raises ProblemFileError: If the file isn't valid YAML or doesn't match the problem schema
    """
    try:
        yaml_data = load_yaml_data(yaml_path, required_keys={"goals"})
    except (RuntimeError, KeyError) as error:
        raise ProblemFileError(f"Could not load planning problem from {yaml_path}") from error

    try:
        schema = ProblemSchema.model_validate(yaml_data)
    except ValidationError as error:
        raise ProblemFileError(f"Invalid planning problem in {yaml_path}:\n{error}") from error

    return schema.to_problem(default_name=yaml_path.stem), schema.to_config()

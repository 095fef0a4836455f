"""Project configuration tree.

A project configuration describes the installation a set of sensor nodes
belongs to: the project, its trains, and per car the mounting positions with
their radio settings. It is loaded from a YAML file.

Example YAML:
    ```yaml
    project:
      label: NextGenRRX
      value: 1
      description: NextGen RRX Zug 83
    trains: [95, 96]
    cars:
      - label: EWB
        value: 1
        positions:
          - {label: A1L, value: 1, radioChannel1: 1, slot: 1, orientation: 1, networkId: 1}
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        frozen=True,
    )


class Position(_ConfigModel):
    """A sensor mounting position inside a car."""

    label: str = Field(description="Textual representation used in the user interface")
    value: int = Field(description="Numeric representation stored in the config")
    radio_channel1: int = Field(alias="radioChannel1")
    slot: int
    radio_channel2: Optional[int] = Field(default=None, alias="radioChannel2")
    link_direction2: Optional[int] = Field(default=None, alias="linkDirection2")
    radio_channel3: Optional[int] = Field(default=None, alias="radioChannel3")
    link_direction3: Optional[int] = Field(default=None, alias="linkDirection3")
    orientation: int
    network_id: int = Field(alias="networkId")


class Car(_ConfigModel):
    """A car and its positions."""

    label: str
    value: int
    positions: List[Position] = Field(default_factory=list)


class Project(_ConfigModel):
    label: str
    value: int
    description: str = ""


class ProjectConfig(_ConfigModel):
    """Root of the project configuration tree."""

    project: Project
    trains: List[int] = Field(default_factory=list)
    cars: List[Car] = Field(default_factory=list)

    def find(self, car: str, position: str) -> Optional[Position]:
        """Find the position config for a car label and a position label.

        Returns:
            The position, or None if the car or the position is unknown
        """
        for car_config in self.cars:
            if car_config.label != car:
                continue
            for position_config in car_config.positions:
                if position_config.label == position:
                    return position_config
            return None
        return None


def load_project_config(path: Union[str, Path]) -> ProjectConfig:
    """Read a project configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed project configuration

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or does
            not match the project configuration model
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except OSError as e:
        raise ConfigError(f"Cannot read project config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Project config {path} must be a mapping at top level")

    try:
        return ProjectConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid project config {path}: {e}") from e

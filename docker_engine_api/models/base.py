"""
Base model shared by every Docker Engine API data shape.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

# Free-form label map attached to containers, images and build outputs
Labels = dict[str, str]

# Filter map accepted by list/prune endpoints, e.g. {"status": ["running"]}
Filters = dict[str, list[str]]


class DockerModel(BaseModel):
    """
    Pass-through representation of a Docker Engine JSON object.

    Field names are the daemon's wire names, case for case. Unknown keys are
    kept so newer daemons never lose data on the way through.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """
        Serialize exactly what was set, under the daemon's field names.

        Unset fields are left out so nothing is defaulted on the caller's
        behalf.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

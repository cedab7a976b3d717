import json
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


class Folder(BaseModel):
    id: str
    label: str
    type: Literal["folder"] = "folder"
    children: List["AssetNode"] = Field(default_factory=list)


class Image(BaseModel):
    id: str
    label: str
    type: Literal["image"] = "image"
    value: str


AssetNode = Annotated[Union[Folder, Image], Field(discriminator="type")]

Folder.model_rebuild()


class Manifest(BaseModel):
    faces: List[AssetNode] = Field(default_factory=list)
    clothes: List[AssetNode] = Field(default_factory=list)
    etc: List[AssetNode] = Field(default_factory=list)

    def to_json(self) -> str:
        """Serialize with 2-space indentation, keeping non-ASCII text literal."""
        return json.dumps(self.model_dump(mode="json"), indent=2, ensure_ascii=False)

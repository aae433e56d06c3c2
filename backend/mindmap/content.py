"""Pydantic schemas for node content (rich text, table, code block, image, icons)."""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RichContent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    html: Optional[str] = None
    json_doc: Optional[dict] = Field(None, alias="json")
    text: Optional[str] = None


class TableCell(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    content: str = ""
    is_header: Optional[bool] = Field(None, alias="isHeader")


class TableData(BaseModel):
    rows: List[List[TableCell]] = Field(default_factory=list)


class CodeBlockData(BaseModel):
    code: str = ""
    language: str = ""


class ImageData(BaseModel):
    """Embedded image. Natural size (width/height) gives the aspect ratio; displayWidth is user-resizable."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    base64: str = ""
    file_name: Optional[str] = Field(None, alias="fileName")
    width: Optional[float] = None
    height: Optional[float] = None
    display_width: Optional[float] = Field(None, alias="displayWidth")
    display_height: Optional[float] = Field(None, alias="displayHeight")
    position: Literal["above", "below", "left", "right"] = "above"
    upload_time: Optional[int] = Field(None, alias="uploadTime")

    @property
    def is_horizontal(self) -> bool:
        return self.position in ("left", "right")


class NodeAttachment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    type: Literal["text", "table", "code"] = "text"
    table: Optional[TableData] = None
    code_block: Optional[CodeBlockData] = Field(None, alias="codeBlock")


class NodeConfig(BaseModel):
    """Per-node config. Styling keys (colors, bold, ...) pass through untouched."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    font_size: Optional[int] = Field(None, alias="fontSize")
    icon: Optional[str] = None
    icons: Optional[Dict[str, str]] = None
    attachment: Optional[NodeAttachment] = None
    image: Optional[ImageData] = None

    @property
    def node_icons(self) -> Union[Dict[str, str], str, None]:
        """New multi-icon map wins over the legacy single icon."""
        if self.icons is not None:
            return self.icons
        return self.icon

"""Pydantic models for the subset of the Notion API the record store reads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NotionBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class NotionRichText(NotionBaseModel):
    plain_text: str = ""


class NotionSelectOption(NotionBaseModel):
    name: str
    id: str | None = None


class NotionPropertyValue(NotionBaseModel):
    """One page property; only the key matching ``type`` is populated."""

    type: str | None = None
    title: list[NotionRichText] | None = None
    rich_text: list[NotionRichText] | None = None
    number: float | None = None
    select: NotionSelectOption | None = None
    multi_select: list[NotionSelectOption] | None = None

    def plain_text(self) -> str | None:
        fragments = self.title if self.title is not None else self.rich_text
        if fragments is None:
            return None
        text = "".join(fragment.plain_text for fragment in fragments).strip()
        return text or None


class NotionPage(NotionBaseModel):
    id: str
    archived: bool = False
    in_trash: bool = False
    properties: dict[str, NotionPropertyValue] = Field(default_factory=dict)


class NotionQueryResponse(NotionBaseModel):
    results: list[NotionPage] = Field(default_factory=list["NotionPage"])
    has_more: bool = False
    next_cursor: str | None = None


class NotionFileUrl(NotionBaseModel):
    url: str


class NotionImage(NotionBaseModel):
    type: str | None = None
    external: NotionFileUrl | None = None
    file: NotionFileUrl | None = None

    @property
    def url(self) -> str | None:
        source = self.external or self.file
        return source.url if source is not None else None


class NotionBlock(NotionBaseModel):
    id: str
    type: str
    image: NotionImage | None = None


class NotionBlockChildren(NotionBaseModel):
    results: list[NotionBlock] = Field(default_factory=list["NotionBlock"])
    has_more: bool = False
    next_cursor: str | None = None


class NotionErrorResponse(NotionBaseModel):
    status: int | None = None
    code: str | None = None
    message: str | None = None

"""Pydantic schemas for frames handed to a drawing toolkit."""

from pydantic import BaseModel, Field


class RectShape(BaseModel):
    """Outlined rectangle marking one solar system."""

    system_id: int
    x: int
    y: int
    width: int
    height: int
    color: tuple[int, int, int]


class LineShape(BaseModel):
    """Line linking the centres of two neighbouring systems."""

    a: int  # System id at the start of the line
    b: int  # System id at the end of the line
    start: tuple[int, int]
    end: tuple[int, int]
    color: tuple[int, int, int]


class Frame(BaseModel):
    """Everything needed to draw the starmap once."""

    background: tuple[int, int, int]
    rects: list[RectShape] = Field(default_factory=list)
    lines: list[LineShape] = Field(default_factory=list)

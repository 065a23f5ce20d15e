"""Pydantic schemas for stored records and configuration."""

import datetime as dt

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class PlayerRecord(BaseModel):
    """Player as stored in players.json."""

    id: int | str
    name: str = Field(..., min_length=1)

    class Config:
        extra = 'ignore'


class MatchRecord(BaseModel):
    """Match as stored in matches.json.

    Accepts both the camelCase keys written by the web front end
    (``player1Id``) and snake_case keys (``player1_id``).
    """

    id: int | str | None = None
    date: dt.date
    player1_id: int | str = Field(..., alias='player1Id')
    player2_id: int | str = Field(..., alias='player2Id')
    player1_legs: int = Field(..., alias='player1Legs')
    player2_legs: int = Field(..., alias='player2Legs')
    player1_high_checkout: int | None = Field(None, alias='player1HighCheckout')
    player2_high_checkout: int | None = Field(None, alias='player2HighCheckout')
    player1_high_visit: int | None = Field(None, alias='player1HighVisit')
    player2_high_visit: int | None = Field(None, alias='player2HighVisit')

    @field_validator(
        'player1_high_checkout',
        'player2_high_checkout',
        'player1_high_visit',
        'player2_high_visit',
        mode='before',
    )
    @classmethod
    def blank_to_none(cls, v):
        """Form inputs submit empty strings for scores left blank."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    class Config:
        populate_by_name = True
        extra = 'ignore'


class LeagueConfig(BaseModel):
    """League configuration settings."""

    league_name: str = Field(..., min_length=1)
    seasons: list[str]
    current_season: str
    form_length: int = Field(default=3, ge=1, le=10)

    @field_validator('seasons')
    @classmethod
    def validate_seasons(cls, v):
        """Ensure at least one season and no duplicates."""
        if not v:
            raise ValueError('At least one season is required')
        if len(set(v)) != len(v):
            raise ValueError(f'Duplicate seasons: {v}')
        return v

    @field_validator('current_season')
    @classmethod
    def validate_current_season(cls, v, info: ValidationInfo):
        """Ensure the current season is one of the configured seasons."""
        seasons = info.data.get('seasons')
        if seasons and v not in seasons:
            raise ValueError(f'Current season {v} not in seasons {seasons}')
        return v

    class Config:
        extra = 'forbid'

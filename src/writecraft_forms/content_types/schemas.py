"""
Content schemas for the schema-driven content types.

Each model declares the data shape of one content type. Attribute names
are snake_case; the camelCase aliases are what the API and the generated
forms see (``imageUrl``, ``userId``).
"""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from writecraft_forms.templates.field_definitions import (
    DIFFICULTY_OPTIONS,
    EXTENDED_DIFFICULTY_OPTIONS,
    GENRE_OPTIONS,
    RARITY_OPTIONS,
    SOCIAL_STATUS_OPTIONS,
)
from writecraft_forms.templates.field_options import (
    GENDER_OPTIONS,
    LAW_TYPES,
    LOCATION_TYPES,
    ORGANIZATION_TYPES,
    POTION_TYPES,
    PROFESSION_RISK_LEVELS,
    PROFESSION_TYPES,
    PROMPT_TYPES,
    PRONOUN_OPTIONS,
)

Genre = Literal[GENRE_OPTIONS]


class ContentSchema(BaseModel):
    """Base for content schemas: camelCase aliases plus the bookkeeping columns."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    user_id: str | None = None
    notebook_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CharacterSchema(ContentSchema):
    given_name: str = Field(..., description="First name at birth")
    family_name: str | None = None
    middle_name: str | None = None
    nickname: str | None = None
    pronouns: Literal[PRONOUN_OPTIONS] | None = None
    age: int | None = None
    gender: Literal[GENDER_OPTIONS] | None = None
    species: str | None = None
    occupation: str | None = None
    description: str | None = None

    image_url: str | None = None
    image_caption: str | None = None
    physical_description: str | None = None
    height: str | None = None
    weight: str | None = None
    build: str | None = None
    hair_color: str | None = None
    hair_texture: str | None = None
    hair_style: str | None = None
    eye_color: str | None = None
    skin_tone: str | None = None
    facial_features: str | None = None
    identifying_marks: str | None = None

    personality: list[str] = Field(default_factory=list)
    motivation: str | None = None
    flaw: str | None = None
    strength: str | None = None
    charisma: str | None = None
    confidence: str | None = None

    skills: list[str] = Field(default_factory=list)
    main_skills: str | None = None
    strengths: str | None = None
    lacking_skills: str | None = None

    key_relationships: str | None = None
    allies: str | None = None
    enemies: str | None = None
    family: list[str] = Field(default_factory=list)

    backstory: str | None = None
    upbringing: str | None = None
    education: str | None = None
    place_of_birth: str | None = None
    date_of_birth: date | None = None
    genre: Genre | None = None


class LocationSchema(ContentSchema):
    name: str
    location_type: Literal[LOCATION_TYPES] | None = None
    description: str | None = None
    image_url: str | None = None

    geography: str | None = None
    climate: str | None = None
    notable_features: list[str] = Field(default_factory=list)
    landmarks: list[str] = Field(default_factory=list)

    population: str | None = None
    government: str | None = None
    economy: str | None = None
    culture: str | None = None

    history: str | None = None
    threats: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    genre: Genre | None = None


class OrganizationSchema(ContentSchema):
    name: str
    org_type: Literal[ORGANIZATION_TYPES] | None = None
    purpose: str | None = None
    description: str | None = None
    image_url: str | None = None

    structure: str | None = None
    leadership: str | None = None
    members: str | None = None
    headquarters: str | None = None

    goals: str | None = None
    history: str | None = None
    allies: list[str] = Field(default_factory=list)
    enemies: list[str] = Field(default_factory=list)
    influence: str | None = None
    resources: str | None = None
    genre: Genre | None = None


class SpeciesSchema(ContentSchema):
    name: str
    classification: str | None = None
    physical_description: str | None = None
    habitat: str | None = None
    behavior: str | None = None
    diet: str | None = None
    lifespan: str | None = None
    intelligence: str | None = None
    reproduction: str | None = None
    social_structure: str | None = None
    abilities: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    cultural_traits: str | None = None
    image_url: str | None = None
    genre: Genre | None = None


class ProfessionSchema(ContentSchema):
    name: str
    profession_type: Literal[PROFESSION_TYPES] | None = None
    description: str | None = None
    social_status: Literal[SOCIAL_STATUS_OPTIONS] | None = None
    skills_required: list[str] = Field(default_factory=list)
    training_required: str | None = None
    apprenticeship: bool = False
    physical_demands: str | None = None
    mental_demands: str | None = None
    responsibilities: str | None = None
    work_environment: str | None = None
    common_tools: list[str] = Field(default_factory=list)
    risk_level: Literal[PROFESSION_RISK_LEVELS] | None = None
    seasonal_work: bool = False
    average_income: str | None = None
    career_progression: str | None = None
    related_professions: list[str] = Field(default_factory=list)
    guilds_organizations: list[str] = Field(default_factory=list)
    historical_context: str | None = None
    genre: Genre | None = None


class PotionSchema(ContentSchema):
    name: str
    potion_type: Literal[POTION_TYPES] | None = None
    rarity: Literal[RARITY_OPTIONS] | None = None
    description: str | None = None
    image_url: str | None = None

    effect: str | None = None
    duration: str | None = None
    onset: str | None = None
    side_effects: str | None = None
    appearance: str | None = None

    ingredients: list[str] = Field(default_factory=list)
    recipe: str | None = None
    difficulty: Literal[EXTENDED_DIFFICULTY_OPTIONS] | None = None
    creator: str | None = None
    cost: str | None = None
    dosage: str | None = None
    genre: Genre | None = None


class LawSchema(ContentSchema):
    name: str
    law_type: Literal[LAW_TYPES] | None = None
    description: str | None = None
    jurisdiction: str | None = None
    text: str | None = Field(default=None, description="Full wording of the law")
    penalties: str | None = None
    enforcement: str | None = None
    exceptions: str | None = None
    creator: str | None = None
    date_enacted: date | None = None
    precedent: str | None = None
    related_laws: list[str] = Field(default_factory=list)
    controversy: str | None = None
    genre: Genre | None = None


class PlotSchema(ContentSchema):
    setup: str
    inciting_incident: str
    first_plot_point: str
    midpoint: str
    second_plot_point: str
    climax: str
    resolution: str
    theme: str
    conflict: str
    story_structure: str | None = None
    genre: Genre | None = None


class PromptSchema(ContentSchema):
    text: str
    genre: Genre
    difficulty: Literal[DIFFICULTY_OPTIONS]
    type: Literal[PROMPT_TYPES]
    word_count: str
    tags: list[str]

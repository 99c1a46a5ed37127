"""
Authored UI configurations for the schema-driven content types.

Only the decisions the schema cannot express live here: tab layout,
labels, ordering and row counts. Everything else is derived.
"""

from writecraft_forms.models.content_config import ContentTypeConfig, FieldUIHints, TabConfig
from writecraft_forms.templates.tab_definitions import COMMON_TABS


def _hints(tab: str, entries: list[tuple[str, dict]]) -> dict[str, FieldUIHints]:
    """Build hints for one tab, numbering ``order`` from 1 in list order."""
    return {
        name: FieldUIHints(tab=tab, order=position, **extra)
        for position, (name, extra) in enumerate(entries, start=1)
    }


CHARACTER_CONFIG = ContentTypeConfig(
    title="Character Editor",
    description="Create detailed characters for your world",
    icon="User",
    default_tab="basic",
    tabs=[
        COMMON_TABS["basic"],
        COMMON_TABS["appearance"],
        COMMON_TABS["personality"],
        COMMON_TABS["skills"],
        COMMON_TABS["relationships"],
        COMMON_TABS["background"],
    ],
    field_hints={
        **_hints(
            "basic",
            [
                ("givenName", {"label": "Given Name", "placeholder": "Their first name at birth"}),
                ("familyName", {"label": "Family Name", "placeholder": "Last name or surname"}),
                ("middleName", {"label": "Middle Name", "placeholder": "Middle name(s)"}),
                ("nickname", {"label": "Nickname", "placeholder": "What friends call them"}),
                ("age", {}),
                ("gender", {}),
                ("species", {"endpoint": "/api/species", "multiple": False}),
                ("occupation", {}),
                (
                    "description",
                    {
                        "rows": 4,
                        "label": "General Description",
                        "placeholder": "A brief overview of this character...",
                    },
                ),
            ],
        ),
        **_hints(
            "appearance",
            [
                ("imageUrl", {}),
                ("imageCaption", {"hidden": True}),
                ("physicalDescription", {"rows": 4}),
                ("height", {}),
                ("weight", {}),
                ("build", {"rows": 3}),
                ("hairColor", {}),
                ("hairTexture", {}),
                ("hairStyle", {}),
                ("eyeColor", {}),
                ("skinTone", {}),
                ("facialFeatures", {"rows": 3}),
                ("identifyingMarks", {"rows": 3}),
            ],
        ),
        **_hints(
            "personality",
            [
                ("personality", {"label": "Personality Traits", "placeholder": "Add personality traits..."}),
                ("motivation", {"rows": 3}),
                ("flaw", {"rows": 3}),
                ("strength", {"rows": 3}),
                ("charisma", {}),
                ("confidence", {}),
            ],
        ),
        **_hints(
            "skills",
            [
                ("skills", {"label": "Skills", "placeholder": "Add skills..."}),
                ("mainSkills", {"rows": 3}),
                ("strengths", {"rows": 3}),
                ("lackingSkills", {"rows": 3}),
            ],
        ),
        **_hints(
            "relationships",
            [
                ("keyRelationships", {"rows": 4}),
                ("allies", {"rows": 3}),
                ("enemies", {"rows": 3}),
                ("family", {"placeholder": "Add family members..."}),
            ],
        ),
        **_hints(
            "background",
            [
                ("backstory", {"rows": 6}),
                ("upbringing", {"rows": 4}),
                ("education", {"rows": 3}),
                ("placeOfBirth", {}),
                ("dateOfBirth", {}),
            ],
        ),
    },
)

LOCATION_CONFIG = ContentTypeConfig(
    title="Location Editor",
    description="Create detailed locations for your world",
    icon="MapPin",
    default_tab="basic",
    tabs=[
        TabConfig(id="basic", label="Basic Info", icon="MapPin", order=1),
        TabConfig(id="geography", label="Geography", icon="Mountain", order=2),
        TabConfig(id="society", label="Society", icon="Users", order=3),
        TabConfig(id="details", label="Details", icon="FileText", order=4),
    ],
    field_hints={
        **_hints(
            "basic",
            [
                ("name", {"label": "Location Name"}),
                ("locationType", {"label": "Type"}),
                ("description", {"rows": 4}),
                ("imageUrl", {}),
            ],
        ),
        **_hints(
            "geography",
            [
                ("geography", {"rows": 4}),
                ("climate", {"rows": 3}),
                ("notableFeatures", {"placeholder": "Add notable features..."}),
                ("landmarks", {"placeholder": "Add landmarks..."}),
            ],
        ),
        **_hints(
            "society",
            [
                ("population", {}),
                ("government", {"rows": 3}),
                ("economy", {"rows": 3}),
                ("culture", {"endpoint": "/api/cultures", "multiple": False}),
            ],
        ),
        **_hints(
            "details",
            [
                ("history", {"rows": 6}),
                ("threats", {"placeholder": "Add threats..."}),
                ("resources", {"placeholder": "Add resources..."}),
            ],
        ),
    },
)

ORGANIZATION_CONFIG = ContentTypeConfig(
    title="Organization Editor",
    description="Create organizations, guilds, and factions",
    icon="Building",
    default_tab="basic",
    tabs=[
        TabConfig(id="basic", label="Basic Info", icon="Building", order=1),
        TabConfig(id="structure", label="Structure", icon="Network", order=2),
        TabConfig(id="details", label="Details", icon="FileText", order=3),
    ],
    field_hints={
        **_hints(
            "basic",
            [
                ("name", {}),
                ("orgType", {"label": "Type"}),
                ("purpose", {"rows": 3}),
                ("description", {"rows": 4}),
                ("imageUrl", {}),
            ],
        ),
        **_hints(
            "structure",
            [
                ("structure", {"rows": 4}),
                ("leadership", {"rows": 3}),
                ("members", {"rows": 3}),
                ("headquarters", {}),
            ],
        ),
        **_hints(
            "details",
            [
                ("goals", {"rows": 3}),
                ("history", {"rows": 5}),
                ("allies", {"placeholder": "Add allies..."}),
                ("enemies", {"placeholder": "Add enemies..."}),
                ("influence", {"rows": 3}),
                ("resources", {"rows": 3}),
            ],
        ),
    },
)

# Types without a hand-tuned layout: a single "general" tab in declaration order

SPECIES_CONFIG = ContentTypeConfig(
    title="Species Editor",
    description="Create species and races for your world",
    icon="Dna",
    default_tab="general",
)

PLOT_CONFIG = ContentTypeConfig(
    title="Plot Editor",
    description="Outline a story from setup to resolution",
    icon="BookOpen",
    default_tab="general",
)

PROMPT_CONFIG = ContentTypeConfig(
    title="Writing Prompt Editor",
    description="Create writing prompts and exercises",
    icon="Lightbulb",
    default_tab="general",
)

PROFESSION_CONFIG = ContentTypeConfig(
    title="Profession Editor",
    description="Create professions and occupations for your world",
    icon="Briefcase",
    default_tab="basic",
    tabs=[
        TabConfig(id="basic", label="Basic Info", icon="Briefcase", order=1),
        TabConfig(id="requirements", label="Requirements", icon="GraduationCap", order=2),
        TabConfig(id="work", label="Work & Economics", icon="Hammer", order=3),
        TabConfig(id="society", label="Society & History", icon="Users", order=4),
    ],
    field_hints={
        **_hints(
            "basic",
            [
                ("name", {"label": "Profession Name"}),
                ("professionType", {"label": "Type"}),
                ("description", {"rows": 4}),
                ("socialStatus", {}),
            ],
        ),
        **_hints(
            "requirements",
            [
                ("skillsRequired", {"placeholder": "Add required skills..."}),
                ("trainingRequired", {}),
                ("apprenticeship", {"label": "Apprenticeship Required"}),
                ("physicalDemands", {}),
                ("mentalDemands", {}),
            ],
        ),
        **_hints(
            "work",
            [
                ("responsibilities", {}),
                ("workEnvironment", {}),
                ("commonTools", {"placeholder": "Add tools of the trade..."}),
                ("riskLevel", {}),
                ("seasonalWork", {}),
                ("averageIncome", {}),
            ],
        ),
        **_hints(
            "society",
            [
                ("careerProgression", {}),
                ("relatedProfessions", {}),
                ("guildsOrganizations", {"label": "Guilds & Organizations", "endpoint": "/api/organizations"}),
                ("historicalContext", {"rows": 4}),
            ],
        ),
    },
)

POTION_CONFIG = ContentTypeConfig(
    title="Potion Creator",
    description="Create magical brews and elixirs",
    icon="FlaskConical",
    default_tab="basic",
    tabs=[
        TabConfig(id="basic", label="Basic Info", icon="FlaskConical", order=1),
        TabConfig(id="properties", label="Properties & Effects", icon="Zap", order=2),
        TabConfig(id="creation", label="Creation & Usage", icon="Sparkles", order=3),
    ],
    field_hints={
        **_hints(
            "basic",
            [
                ("imageUrl", {}),
                ("name", {"label": "Potion Name"}),
                ("potionType", {"label": "Potion Type"}),
                ("rarity", {}),
                ("description", {}),
                ("genre", {}),
            ],
        ),
        **_hints(
            "properties",
            [
                ("effect", {"label": "Primary Effect", "placeholder": "What does this potion do?"}),
                ("duration", {}),
                ("onset", {"label": "Onset Time", "placeholder": "How quickly does it work?"}),
                ("sideEffects", {"placeholder": "Any negative side effects?"}),
                ("appearance", {"placeholder": "Color, texture, smell..."}),
            ],
        ),
        **_hints(
            "creation",
            [
                ("ingredients", {"placeholder": "Add ingredients..."}),
                ("recipe", {"placeholder": "How is this potion made?"}),
                ("difficulty", {"label": "Brewing Difficulty"}),
                ("creator", {"label": "Original Creator"}),
                ("cost", {"label": "Market Value"}),
                ("dosage", {"placeholder": "How much to consume?"}),
            ],
        ),
    },
)

LAW_CONFIG = ContentTypeConfig(
    title="Law Editor",
    description="Create laws and legal codes for your world",
    icon="Scale",
    default_tab="basic",
    tabs=[
        TabConfig(id="basic", label="Basic Info", icon="Scale", order=1),
        TabConfig(id="provisions", label="Provisions", icon="FileText", order=2),
        TabConfig(id="history", label="History & Context", icon="BookOpen", order=3),
    ],
    field_hints={
        **_hints(
            "basic",
            [
                ("name", {"label": "Law Name"}),
                ("lawType", {"label": "Law Type"}),
                ("jurisdiction", {}),
                ("description", {"rows": 4}),
            ],
        ),
        **_hints(
            "provisions",
            [
                ("text", {"label": "Legal Text", "rows": 6}),
                ("penalties", {}),
                ("enforcement", {}),
                ("exceptions", {}),
            ],
        ),
        **_hints(
            "history",
            [
                ("creator", {"label": "Enacted By"}),
                ("dateEnacted", {}),
                ("precedent", {}),
                ("relatedLaws", {}),
                ("controversy", {}),
            ],
        ),
    },
)

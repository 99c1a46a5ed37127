"""
Centralized type options for content-type select fields.

Tuples so that no caller can mutate a shared list; the field factories
copy them into each field they build.
"""

# Items & objects

WEAPON_TYPES = (
    "Axe", "Bomb", "Bow", "Cannon", "Club", "Crossbow", "Dagger", "Grenade",
    "Hammer", "Katana", "Knife", "Lance", "Mace", "Musket", "Pike", "Pistol",
    "Polearm", "Rifle", "Sabre", "Scimitar", "Shotgun", "Slingshot", "Spear",
    "Staff", "Sword", "Whip", "Wand", "Other",
)

ARMOR_TYPES = (
    "Light", "Medium", "Heavy", "Shield", "Helmet", "Gauntlets", "Boots",
    "Cloak", "Magical", "Plate Armour", "Chainmail", "Leather", "Scale",
    "Brigandine", "Powered Armour", "Force Field", "Other",
)

ITEM_TYPES = (
    "Weapon", "Armour", "Tool", "Magic Item", "Artifact", "Consumable",
    "Trade Good", "Art Object", "Document", "Other",
)

# Places

LOCATION_TYPES = (
    "Forest", "Mountain", "Desert", "Ocean", "River", "Cave", "Settlement",
    "Mountain Range", "Country", "Lake", "Island", "Swamp", "Volcano",
    "Valley", "Canyon", "Jungle", "Tundra", "Continent", "Plain", "Sea",
    "Glacier", "Grassland", "Coastline", "Other",
)

BUILDING_TYPES = (
    "House", "Castle", "Temple", "Shop", "Tavern", "Library", "Tower",
    "Mansion", "Barracks", "Ruins", "Inn", "Dungeon", "Prison", "Church",
    "Hospital", "Other",
)

SETTLEMENT_TYPES = (
    "City", "Town", "Village", "Outpost", "Fortress", "Trading Post",
    "Port", "Capital", "County", "Country", "State", "Province", "Campsite",
    "Other",
)

# Beings

CREATURE_TYPES = (
    "Beast", "Dragon", "Humanoid", "Fey", "Fiend", "Celestial",
    "Construct", "Undead", "Elemental", "Aberration", "Other",
)

# Groups

ORGANIZATION_TYPES = (
    "Guild", "Corporation", "Government", "Military", "Religious",
    "Academic", "Criminal", "Secret Society", "Tribe", "Clan", "Other",
)

FACTION_TYPES = (
    "Political", "Military", "Religious", "Criminal", "Mercantile",
    "Academic", "Secret", "Revolutionary", "Noble", "Other",
)

# Consumables

POTION_TYPES = (
    "Healing", "Enhancement", "Transformation", "Poison", "Utility",
    "Combat", "Magical", "Alchemical", "Other",
)

# Governance

LAW_TYPES = (
    "Criminal", "Civil", "Commercial", "Constitutional", "Religious",
    "Military", "Property", "Family", "Tax", "Other",
)

POLICY_TYPES = (
    "Economic", "Social", "Foreign", "Military", "Environmental",
    "Educational", "Healthcare", "Administrative", "Other",
)

# Story & narrative

PROMPT_TYPES = (
    "Character Development", "Plot Hook", "Setting Description", "Dialogue",
    "Opening Line", "Story Structure", "World Building", "Conflict", "Other",
)

CONFLICT_TYPES = (
    "Internal", "External", "Interpersonal", "Social", "Political",
    "Moral", "Physical", "Emotional", "Spiritual", "Other",
)

# Professions

PROFESSION_TYPES = (
    "Warrior", "Mage", "Merchant", "Craftsman", "Noble", "Scholar",
    "Entertainer", "Laborer", "Administrator", "Healer", "Explorer",
    "Criminal", "Religious", "General",
)

PROFESSION_RISK_LEVELS = ("Low", "Moderate", "High", "Extreme")

# Characters

GENDER_OPTIONS = (
    "Male", "Female", "Non-Binary", "Agender", "Bigender", "Genderfluid",
    "Genderqueer", "Transgender", "Intersex", "Androgynous",
)

PRONOUN_OPTIONS = (
    "they/them", "she/her", "he/him", "xe/xem", "ze/zir", "she/they",
    "he/they", "any pronouns", "ask for pronouns",
)

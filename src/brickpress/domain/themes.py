"""Poster themes and model types."""

from enum import StrEnum


class Theme(StrEnum):
    """Named visual universe for a poster."""

    GALACTIC_CONQUEST = "galactic-conquest"
    NINJA_WARRIORS = "ninja-warriors"
    URBAN_METROPOLIS = "urban-metropolis"
    FANTASY_REALM = "fantasy-realm"
    DEEP_SEA_ADVENTURE = "deep-sea-adventure"


class ModelType(StrEnum):
    """Kind of model shown in the photo."""

    VEHICLE = "vehicle"
    BUILDING = "building"
    CREATURE = "creature"
    FIGURE = "figure"
    UNKNOWN = "unknown"


THEME_LABELS: dict[Theme, str] = {
    Theme.GALACTIC_CONQUEST: "Galactic Conquest",
    Theme.NINJA_WARRIORS: "Ninja Warriors",
    Theme.URBAN_METROPOLIS: "Urban Metropolis",
    Theme.FANTASY_REALM: "Fantasy Realm",
    Theme.DEEP_SEA_ADVENTURE: "Deep Sea Adventure",
}

# Stored on records when the model picked the styling.
RANDOM_THEME_LABEL = "Let us decide"


def parse_theme(raw: str | None) -> Theme | None:
    """Parse a theme id, treating blank values as no selection."""
    if raw is None or not raw.strip():
        return None
    return Theme(raw.strip())


def parse_model_type(raw: str | None) -> ModelType:
    """Parse a model type, defaulting to unknown."""
    if raw is None or not raw.strip():
        return ModelType.UNKNOWN
    return ModelType(raw.strip())

"""Pure mappings from weather readings and dates to display categories."""

from __future__ import annotations

from enum import Enum


class TemperatureCategory(Enum):
    FREEZING = "freezing"
    COLD = "cold"
    MILD = "mild"
    WARM = "warm"
    HOT = "hot"


class ConditionCategory(Enum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    OBSCURED = "obscured"
    PRECIPITATING = "precipitating"
    UNKNOWN = "unknown"


class Season(Enum):
    MAY = "may"
    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"


# Exact, case-sensitive provider descriptions. "light rain" is deliberately absent.
CONDITION_GROUPS: dict[ConditionCategory, frozenset[str]] = {
    ConditionCategory.CLEAR: frozenset({"clear sky"}),
    ConditionCategory.CLOUDY: frozenset(
        {"few clouds", "scattered clouds", "broken clouds"}
    ),
    ConditionCategory.OBSCURED: frozenset(
        {"overcast clouds", "mist", "haze", "smoke", "sand", "dust", "fog", "squalls"}
    ),
    ConditionCategory.PRECIPITATING: frozenset(
        {"shower rain", "rain", "thunderstorm", "snow"}
    ),
}

ADVISORIES: dict[Season, str] = {
    Season.MAY: (
        "Congratulations, it's May, the best month for birding! To further "
        "enhance your chances, it is preferrable to get started as close to "
        "dawn as possible."
    ),
    Season.WINTER: (
        "Happy weird duck season! It would be best to get outside at sometime "
        "between midday and sunset, since the air takes a few hours to heat up "
        "from the sunlight. This is the ideal time to hone in on your "
        "bird-listening skills. Birdsong tends to carry through winter air more "
        "efficiently than summer air, and more owls tend to call during the "
        "winter. If the weather isn't preferrable, it is the season to put "
        "feeders out and birdwatch from the comfort of a heated room. If you "
        "decide to brave the weather, keep in mind that birds are less deterred "
        "by temperature than they are from food scarcity. Therefore, they will "
        "most likely be found near food sources, such as conifer stands, open "
        "water, edges of fields etc, as well as in mixed species flocks. It is "
        "also generally easier to spot birds in deciduous trees and in the snow "
        "during this season."
    ),
    Season.SPRING: (
        "It is preferrable to get started as close to dawn as possible. Enjoy "
        "the wonderful weather as your fine-feathered friends definitely are "
        "enjoying it too!"
    ),
    Season.SUMMER: (
        "Summer is a wonderful time to go birdwatching. There is a higher "
        "likelihood of spotting more varieties of songbirds than you are used "
        "to seeing. To avoid peak summer heat and maximize the amount of bird "
        "species you may see, try getting outside earlier in the morning."
    ),
    Season.FALL: (
        "Midday is the best time to spot birds out in the fall. It is also "
        "likely that you may spot out-of-the-ordinary species during the fall "
        "migration season. It is easier to hear birds further away, but keep "
        "in mind that recognizing them when you spot them may be complicated "
        "by duller colored non-breeding plumage. If applicable, wear a "
        "reflective vest as it may be hunting season where you live."
    ),
}


def classify_temperature(temp_c: float) -> TemperatureCategory:
    """Bucket a Celsius temperature; each lower bound is inclusive."""
    if temp_c < 0.0:
        return TemperatureCategory.FREEZING
    if temp_c < 10.0:
        return TemperatureCategory.COLD
    if temp_c < 20.0:
        return TemperatureCategory.MILD
    if temp_c < 30.0:
        return TemperatureCategory.WARM
    return TemperatureCategory.HOT


def classify_condition(description: str) -> ConditionCategory:
    """Match a provider description exactly; unrecognised text is UNKNOWN."""
    for category, descriptions in CONDITION_GROUPS.items():
        if description in descriptions:
            return category
    return ConditionCategory.UNKNOWN


def classify_season(month: int) -> Season:
    """Pick the birding season for a calendar month.

    The checks run in order and the first match wins, so May is claimed
    before the spring range and spring only keeps March, April and June.

    Raises:
        ValueError: If ``month`` is not in 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 5:
        return Season.MAY
    if month <= 2 or month == 12:
        return Season.WINTER
    if month <= 6:
        return Season.SPRING
    if month <= 9:
        return Season.SUMMER
    return Season.FALL


def seasonal_advisory(month: int) -> str:
    """Return the birdwatching tip for a calendar month."""
    return ADVISORIES[classify_season(month)]

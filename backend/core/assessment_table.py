"""
Field table for assessment input: defaults, ranges, allowed enum values and
the legacy names/labels older front-ends still send.
"""

AGE_RANGE = (1, 120)

# 0-10 self-rated scales
SCALE_RANGE = (0, 10)
SCALE_FIELDS = ("stress", "mentalWellbeing", "anxiety", "sleepQuality", "socialConnection")

SET_FIELDS = ("conditions", "mentalHealthIssues")

# Set entries that mean "nothing to report" rather than a real item.
SET_SENTINELS = {
    "conditions": {"none"},
}

ENUM_VALUES: dict[str, tuple[str, ...]] = {
    "gender": ("male", "female", "other"),
    "smoke": ("Yes", "No"),
    "alcohol": ("None", "Occasionally", "Regularly"),
    "exercise": ("Never", "1-2 times", "3-5 times", "Daily"),
    "mentalSupport": ("Yes", "No"),
    "relaxationFrequency": ("Never", "Rarely", "Sometimes", "Often"),
    "screenTime": ("<2h", "2-6h", ">6h"),
}

# Keys are lower-cased; matched after case-insensitive lookup fails.
ENUM_ALIASES: dict[str, dict[str, str]] = {
    "exercise": {
        "1-2": "1-2 times",
        "3-5": "3-5 times",
    },
    "screenTime": {
        "less than 2 hours": "<2h",
        "2-6 hours": "2-6h",
        "more than 6 hours": ">6h",
    },
}

# legacy name -> canonical name
FIELD_ALIASES = {
    "relaxation": "relaxationFrequency",
}

FIELD_DEFAULTS: dict[str, object] = {
    "gender": None,
    "smoke": "No",
    "alcohol": "None",
    "exercise": None,
    "conditions": [],
    "stress": 5,
    "mentalWellbeing": 5,
    "anxiety": 5,
    "sleepQuality": 5,
    "mentalHealthIssues": [],
    "mentalSupport": "No",
    "relaxationFrequency": None,
    "screenTime": None,
    "socialConnection": None,
}

# Substituted when a scale field is present but not a number.
UNPARSEABLE_SCALE_DEFAULT = 5

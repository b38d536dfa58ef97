"""Static application settings and shared constants.

Runtime settings that differ per deployment are read from the environment;
everything else here is fixed product behaviour shared by the services.
"""

import os

APP_NAME = "Body Recomposition API"
APP_VERSION = "0.1.0"
REPORT_VERSION = "0.1.0-pre"

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

GENDERS = ("male", "female")
ACTIVITY_LEVELS = ("sedentary", "lightlyActive", "moderatelyActive", "highlyActive")
GOALS = ("bulk", "cut", "maintain")

# Input validation limits (metric units)
AGE_RANGE = (16, 80)
BODY_FAT_RANGE = (8, 35)
SENIOR_AGE = 65
BODY_FAT_HIGH_WARNING = 30

# Physiological body fat band used by the macro interpolation, per gender
BODY_FAT_BANDS = {
    "male": (10, 20),
    "female": (18, 28),
}

BMI_CATEGORIES = {
    "underweight": 18.5,
    "normal": 25,
    "overweight": 30,
}

# mg per day
CAFFEINE_INTAKE = {
    "training": 250,
    "rest": 150,
}

EXPORT_FORMATS = ("json", "csv", "xml", "txt")

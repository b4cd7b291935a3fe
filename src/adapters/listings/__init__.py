from adapters.listings.models import ControllersListing, ModelsListing, StatusListing
from adapters.listings.parser import (
    PARSERS,
    parse_applications,
    parse_controllers,
    parse_models,
    parse_units,
)

__all__ = [
    "ControllersListing",
    "ModelsListing",
    "PARSERS",
    "StatusListing",
    "parse_applications",
    "parse_controllers",
    "parse_models",
    "parse_units",
]

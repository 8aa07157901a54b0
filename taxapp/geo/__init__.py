from taxapp.geo.location import LocationLookupError, detect_user_location

__all__ = ["LocationLookupError", "detect_user_location"]

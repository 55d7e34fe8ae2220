from .api import GeocodeTool, ReverseGeocodeTool, register_geocoding_tools

__all__ = ["GeocodeTool", "ReverseGeocodeTool", "register_geocoding_tools"]

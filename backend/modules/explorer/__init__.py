"""
modules/explorer package — view-models behind the attraction explorer page.

    filter_attractions   search bar
    MapView              markers + camera
    DetailPanel          sidebar for the selected attraction
    Slideshow            home-page carousel
    PageController       selection state machine wiring them together
"""
from modules.explorer.map_view import Camera, MapState, MapView, Marker, MarkerIcon
from modules.explorer.page_controller import (
    NoSelectionError,
    Notification,
    PageController,
    PageState,
)
from modules.explorer.search_filter import filter_attractions
from modules.explorer.sidebar import DetailPanel
from modules.explorer.slideshow import Slideshow

__all__ = [
    "Camera",
    "MapState",
    "MapView",
    "Marker",
    "MarkerIcon",
    "NoSelectionError",
    "Notification",
    "PageController",
    "PageState",
    "filter_attractions",
    "DetailPanel",
    "Slideshow",
]

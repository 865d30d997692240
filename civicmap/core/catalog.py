"""
Static city catalogue shared by the API and the seed generator.

Categories, marker colours, the authored landmarks and the garbage
collection points live here so the map, stats and photo pages all read
the same tables.
"""
from enum import Enum
from typing import Dict, List


class Category(str, Enum):
    HISTORIC = "historic"
    RELIGIOUS = "religious"
    EDUCATIONAL = "educational"
    COMMERCIAL = "commercial"
    RECREATION = "recreation"
    TRANSPORT = "transport"
    INFRASTRUCTURE = "infrastructure"
    GOVERNMENT = "government"
    MARKET = "market"
    HOSPITAL = "hospital"
    LIBRARY = "library"
    GARBAGE = "garbage"


class GarbageStatus(str, Enum):
    NORMAL = "normal"
    ATTENTION = "attention"
    CRITICAL = "critical"


MARKER_COLORS: Dict[Category, str] = {
    Category.HISTORIC: "#FF9800",
    Category.RELIGIOUS: "#FFC107",
    Category.EDUCATIONAL: "#3F51B5",
    Category.COMMERCIAL: "#9C27B0",
    Category.RECREATION: "#4CAF50",
    Category.TRANSPORT: "#F44336",
    Category.INFRASTRUCTURE: "#2196F3",
    Category.GOVERNMENT: "#795548",
    Category.MARKET: "#FF5722",
    Category.HOSPITAL: "#E91E63",
    Category.LIBRARY: "#673AB7",
}

GARBAGE_STATUS_COLORS: Dict[GarbageStatus, str] = {
    GarbageStatus.NORMAL: "#4CAF50",
    GarbageStatus.ATTENTION: "#FF9800",
    GarbageStatus.CRITICAL: "#F44336",
}

DEFAULT_MARKER_COLOR = "#8884d8"


def category_color(category: str) -> str:
    if category == Category.GARBAGE.value:
        return GARBAGE_STATUS_COLORS[GarbageStatus.NORMAL]
    try:
        return MARKER_COLORS[Category(category)]
    except ValueError:
        return DEFAULT_MARKER_COLOR


_WIKI = "https://upload.wikimedia.org/wikipedia/commons/thumb"

LANDMARKS: List[dict] = [
    {
        "id": 1,
        "name": "Kanaka Durga Temple",
        "category": Category.RELIGIOUS.value,
        "description": "Famous temple dedicated to Goddess Durga located on Indrakeeladri hill. "
                       "One of the most important religious sites in Andhra Pradesh.",
        "latitude": 16.5175,
        "longitude": 80.6096,
        "main_image": f"{_WIKI}/d/d7/Sri_Durga_Malleswara_Swamy_Varla_Devasthanam.jpg/"
                      "320px-Sri_Durga_Malleswara_Swamy_Varla_Devasthanam.jpg",
    },
    {
        "id": 2,
        "name": "Prakasam Barrage",
        "category": Category.INFRASTRUCTURE.value,
        "description": "Major dam across Krishna River connecting Vijayawada with Guntur district. "
                       "Built in 1957, it serves irrigation needs and is a popular tourist spot.",
        "latitude": 16.5061,
        "longitude": 80.6080,
        "main_image": f"{_WIKI}/b/b4/Prakasam_Barrage_evening.jpg/320px-Prakasam_Barrage_evening.jpg",
    },
    {
        "id": 3,
        "name": "Vijayawada Railway Station",
        "category": Category.TRANSPORT.value,
        "description": "One of the busiest railway stations in India with over 1.4 million passengers daily. "
                       "A key junction connecting North and South India.",
        "latitude": 16.5175,
        "longitude": 80.6236,
        "main_image": f"{_WIKI}/7/77/Vijayawada_Junction_railway_station_board.jpg/"
                      "320px-Vijayawada_Junction_railway_station_board.jpg",
    },
    {
        "id": 4,
        "name": "Rajiv Gandhi Park",
        "category": Category.RECREATION.value,
        "description": "Major urban park in the heart of the city with lush greenery, walking paths, "
                       "and recreational facilities for families.",
        "latitude": 16.5009,
        "longitude": 80.6525,
        "main_image": f"{_WIKI}/0/07/Rajiv_Gandhi_Park%2C_Vijayawada.jpg/"
                      "320px-Rajiv_Gandhi_Park%2C_Vijayawada.jpg",
    },
    {
        "id": 5,
        "name": "Mangalagiri Market Area",
        "category": Category.MARKET.value,
        "description": "A bustling market area known for textiles, fresh produce, spices, and local handicrafts. "
                       "Popular among locals and tourists alike.",
        "latitude": 16.4300,
        "longitude": 80.5580,
        "main_image": f"{_WIKI}/4/4c/MG_Road%2C_Vijayawada.jpg/320px-MG_Road%2C_Vijayawada.jpg",
    },
    {
        "id": 6,
        "name": "SRM University, AP",
        "category": Category.EDUCATIONAL.value,
        "description": "A prominent private university offering undergraduate, postgraduate, and doctoral "
                       "programs in engineering, sciences, liberal arts, and management.",
        "latitude": 16.4807,
        "longitude": 80.5010,
        "main_image": f"{_WIKI}/2/2e/SRM_University%2C_Andhra_Pradesh.jpg/"
                      "320px-SRM_University%2C_Andhra_Pradesh.jpg",
    },
]

# fill_level is a percentage; status and fill level are authored, not computed
GARBAGE_COLLECTION_POINTS: List[dict] = [
    {"id": "gc1", "name": "Benz Circle Collection Point", "status": GarbageStatus.CRITICAL,
     "fill_level": 85, "last_collected": "2025-03-20T08:30:00",
     "latitude": 16.5060, "longitude": 80.6420, "address": "Benz Circle, MG Road, Vijayawada"},
    {"id": "gc2", "name": "Railway Station Waste Facility", "status": GarbageStatus.NORMAL,
     "fill_level": 40, "last_collected": "2025-03-21T07:15:00",
     "latitude": 16.5190, "longitude": 80.6250, "address": "Near Platform 1, Vijayawada Railway Station"},
    {"id": "gc3", "name": "Governorpet Collection Center", "status": GarbageStatus.ATTENTION,
     "fill_level": 70, "last_collected": "2025-03-20T16:00:00",
     "latitude": 16.5079, "longitude": 80.6315, "address": "Governorpet Main Road, Vijayawada"},
    {"id": "gc4", "name": "Autonagar Waste Management", "status": GarbageStatus.NORMAL,
     "fill_level": 35, "last_collected": "2025-03-21T06:45:00",
     "latitude": 16.4890, "longitude": 80.6750, "address": "Autonagar Industrial Area, Vijayawada"},
    {"id": "gc5", "name": "Ajit Singh Nagar Recycling Center", "status": GarbageStatus.ATTENTION,
     "fill_level": 65, "last_collected": "2025-03-20T17:30:00",
     "latitude": 16.5232, "longitude": 80.6650, "address": "Ajit Singh Nagar, Vijayawada"},
    {"id": "gc6", "name": "Gunadala Collection Point", "status": GarbageStatus.CRITICAL,
     "fill_level": 90, "last_collected": "2025-03-20T09:00:00",
     "latitude": 16.5298, "longitude": 80.6420, "address": "Near Gunadala Matha Church, Vijayawada"},
    {"id": "gc7", "name": "Machavaram Collection Center", "status": GarbageStatus.NORMAL,
     "fill_level": 28, "last_collected": "2025-03-21T08:00:00",
     "latitude": 16.5170, "longitude": 80.6550, "address": "Machavaram Down, Vijayawada"},
    {"id": "gc8", "name": "Patamata Collection Facility", "status": GarbageStatus.NORMAL,
     "fill_level": 55, "last_collected": "2025-03-21T07:30:00",
     "latitude": 16.4930, "longitude": 80.6600, "address": "Patamata Main Road, Vijayawada"},
]

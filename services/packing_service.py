import logging
from typing import List, Optional, Tuple

from services.firebase_service import db
from schemas.packing_schema import PackingCategory, PackingItem

logger = logging.getLogger(__name__)

# --- Predefined Packing Items ---
# category id: (display name, icon, [(item name, essential), ...])
BASE_CATEGORIES = {
    "clothing": ("Clothing", "👕", [
        ("Underwear", True),
        ("Socks", True),
        ("T-shirts", True),
        ("Pants/Jeans", True),
        ("Shoes", True),
        ("Jacket", False),
        ("Sweater", False),
        ("Shorts", False),
        ("Pajamas", True),
    ]),
    "toiletries": ("Toiletries", "🧴", [
        ("Toothbrush & Toothpaste", True),
        ("Deodorant", True),
        ("Shampoo & Conditioner", True),
        ("Soap/Body Wash", True),
        ("Sunscreen", False),
        ("Razor", False),
        ("Medications", True),
        ("First Aid Kit", False),
    ]),
    "electronics": ("Electronics", "🔌", [
        ("Phone Charger", True),
        ("Power Bank", False),
        ("Laptop & Charger", False),
        ("Camera", False),
        ("Headphones", False),
        ("Travel Adapter", False),
    ]),
    "documents": ("Travel Documents", "📄", [
        ("Passport/ID", True),
        ("Travel Insurance", False),
        ("Booking Confirmations", True),
        ("Credit Cards", True),
        ("Cash", True),
        ("Driver's License", False),
    ]),
}

# trip type: [(category id, tag, [(item name, essential), ...])]
TRIP_TYPE_ADDITIONS = {
    "business": [
        ("clothing", "business", [("Business Suit", True), ("Dress Shoes", True)]),
        ("electronics", "business", [("Business Cards", True)]),
    ],
    "leisure": [
        ("clothing", "leisure", [("Swimsuit", False), ("Sandals", False)]),
    ],
    "family": [
        ("clothing", "leisure", [("Swimsuit", False), ("Sandals", False)]),
    ],
}

ADVENTURE_GEAR = ("adventure", "Adventure Gear", "⛰️", [
    ("Hiking Boots", True),
    ("Backpack", True),
    ("Water Bottle", True),
    ("Flashlight", False),
])

RAIN_GEAR = [("Rain Jacket", True), ("Umbrella", True)]


def _tagged_items(category_id: str, tag: str, entries) -> List[PackingItem]:
    # Tagged ids count from 1 so they never collide with the 0-based base ids
    prefix = f"{category_id}-{tag}" if tag else category_id
    return [
        PackingItem(id=f"{prefix}-{i}", name=name, category=category_id, essential=essential)
        for i, (name, essential) in enumerate(entries, start=1)
    ]


def generate_packing_list(trip_type: str, destination: str = "", weather_hint: Optional[str] = None) -> List[PackingCategory]:
    """
    Builds a categorized packing list for a trip.

    The four base categories are always present. The trip type and an optional
    weather description add items on top. Unknown trip types get the base list.
    The same inputs always give the same list, ids included.
    """
    trip_type = (trip_type or "").strip().lower()

    categories = []
    for category_id, (name, icon, entries) in BASE_CATEGORIES.items():
        items = [
            PackingItem(id=f"{category_id}-{i}", name=item_name, category=category_id, essential=essential)
            for i, (item_name, essential) in enumerate(entries)
        ]
        categories.append(PackingCategory(id=category_id, name=name, icon=icon, items=items))

    by_id = {category.id: category for category in categories}

    for category_id, tag, entries in TRIP_TYPE_ADDITIONS.get(trip_type, []):
        by_id[category_id].items.extend(_tagged_items(category_id, tag, entries))

    if trip_type == "adventure":
        category_id, name, icon, entries = ADVENTURE_GEAR
        categories.append(PackingCategory(
            id=category_id, name=name, icon=icon, items=_tagged_items(category_id, "", entries)
        ))

    # Matched case-insensitively: weather APIs report both "Rain" and "light rain"
    if weather_hint and "rain" in weather_hint.lower():
        by_id["clothing"].items.extend(_tagged_items("clothing", "weather", RAIN_GEAR))

    logger.debug("Generated packing list for %s trip to %s (%d categories)", trip_type or "unknown", destination, len(categories))
    return categories


def toggle_item(categories: List[PackingCategory], category_id: str, item_id: str) -> Tuple[List[PackingCategory], Optional[PackingItem]]:
    """
    Flips the packed flag of one item.
    Returns a new list and the toggled item; the item is None when no such id exists.
    """
    updated = [category.model_copy(deep=True) for category in categories]
    for category in updated:
        if category.id != category_id:
            continue
        for item in category.items:
            if item.id == item_id:
                item.packed = not item.packed
                return updated, item
    return updated, None


def packing_progress(categories: List[PackingCategory]) -> Tuple[int, int, float]:
    """Returns (packed items, total items, percent packed)."""
    total = sum(len(category.items) for category in categories)
    packed = sum(1 for category in categories for item in category.items if item.packed)
    percent = round(packed / total * 100, 1) if total else 0.0
    return packed, total, percent


def build_packing_response(categories: List[PackingCategory], trip_id: Optional[str] = None) -> dict:
    packed, total, percent = packing_progress(categories)
    return {
        "trip_id": trip_id,
        "categories": categories,
        "packed_items": packed,
        "total_items": total,
        "progress_percent": percent,
    }


# --- Persistence ---

def save_packing_list(trip_id: str, categories: List[PackingCategory]):
    """Stores a packing list for a trip, replacing any existing one."""
    checklist_ref = db.reference(f'packing_lists/{trip_id}')
    checklist_ref.set([category.model_dump() for category in categories])
    logger.info("Saved packing list for trip %s", trip_id)


def get_packing_list(trip_id: str) -> Optional[List[PackingCategory]]:
    """Retrieves the stored packing list for a trip, or None."""
    checklist_ref = db.reference(f'packing_lists/{trip_id}')
    list_data = checklist_ref.get()

    if not list_data:
        return None

    # Realtime Database returns arrays as dicts when keys are sparse
    if isinstance(list_data, dict):
        list_data = [list_data[key] for key in sorted(list_data, key=int)]

    return [PackingCategory(**category) for category in list_data if category]


def toggle_packed_status(trip_id: str, category_id: str, item_id: str) -> Optional[PackingItem]:
    """
    Toggles the 'packed' status of a stored packing list item.
    Returns the updated item, or None when the list or the item does not exist.
    """
    categories = get_packing_list(trip_id)
    if categories is None:
        return None

    updated, item = toggle_item(categories, category_id, item_id)
    if item is None:
        return None

    save_packing_list(trip_id, updated)
    return item

import datetime
import logging
from typing import Optional

from services.firebase_service import db
from schemas.trip_schema import TripCreate

logger = logging.getLogger(__name__)

def save_trip_for_user(trip_data: TripCreate, user_id: str):
    """
    Saves a new trip for a user and returns it with its generated id.
    Trips are never updated in place; a changed plan is saved as a new trip.
    """
    data_to_save = trip_data.model_dump(mode="json", exclude_none=True)
    data_to_save["user_id"] = user_id
    data_to_save["created_at"] = datetime.datetime.now(datetime.timezone.utc).isoformat()

    trips_ref = db.reference('trips')
    new_trip_ref = trips_ref.push()
    new_trip_ref.set(data_to_save)

    data_to_save['id'] = new_trip_ref.key

    if trip_data.destinations:
        logger.info("Trip saved: %s (%d destinations) for user %s", data_to_save['id'], len(trip_data.destinations), user_id)
    else:
        logger.info("Trip saved: %s (%s) for user %s", data_to_save['id'], trip_data.destination, user_id)

    return data_to_save

def get_trips_for_user(user_id: str):
    """
    Retrieves all trips for a specific user, newest first.
    """
    trips_ref = db.reference('trips')
    user_trips = trips_ref.order_by_child('user_id').equal_to(user_id).get()

    if not user_trips:
        return []

    trips_list = []
    for trip_id, trip_data in user_trips.items():
        trip_data['id'] = trip_id
        trips_list.append(trip_data)

    trips_list.sort(key=lambda x: x.get('created_at', ''), reverse=True)
    return trips_list

def get_trip_by_id(trip_id: str) -> Optional[dict]:
    """
    Retrieves a single trip by its unique ID, or None.
    """
    trip = db.reference(f'trips/{trip_id}').get()

    if trip:
        trip['id'] = trip_id

    return trip

def delete_trip_for_user(trip_id: str, user_id: str) -> bool:
    """
    Deletes a trip owned by the user, together with its packing list.
    Returns False when the trip does not exist or belongs to someone else.
    """
    trip = get_trip_by_id(trip_id)
    if not trip or trip.get('user_id') != user_id:
        return False

    db.reference(f'trips/{trip_id}').delete()
    db.reference(f'packing_lists/{trip_id}').delete()
    logger.info("Trip deleted: %s for user %s", trip_id, user_id)
    return True

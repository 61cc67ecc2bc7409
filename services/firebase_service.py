import json
import logging

import firebase_admin
from firebase_admin import credentials, auth, db

from core.config import settings

logger = logging.getLogger(__name__)

def initialize_firebase():
    """Initializes the Firebase Admin SDK."""
    if firebase_admin._apps:
        return

    try:
        # The service account key is expected to be a JSON string in the environment variable.
        service_account_info = json.loads(settings.FIREBASE_SERVICE_ACCOUNT_KEY_JSON)

        cred = credentials.Certificate(service_account_info)

        firebase_admin.initialize_app(cred, {
            'databaseURL': settings.FIREBASE_DATABASE_URL
        })
        logger.info("Firebase initialized successfully.")
    except Exception as e:
        # The app still starts; auth and storage calls will fail until credentials are provided.
        logger.error("Error initializing Firebase: %s", e)

def create_user_in_firebase(email, password, full_name):
    """Creates a user in Firebase Auth and stores the profile in the Realtime Database."""
    try:
        user_record = auth.create_user(
            email=email,
            password=password,
            display_name=full_name,
            email_verified=False
        )
    except auth.EmailAlreadyExistsError:
        raise ValueError("Email already registered")

    user_data = {
        'email': user_record.email,
        'full_name': full_name,
        'created_at': user_record.user_metadata.creation_timestamp
    }
    db.reference(f'users/{user_record.uid}').set(user_data)
    logger.info("Created user %s", user_record.uid)

    return {
        "uid": user_record.uid,
        "email": user_record.email,
        "full_name": user_record.display_name
    }

# Call initialization on module load.
initialize_firebase()

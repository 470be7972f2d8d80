"""
santagemita/config.py - Application configuration and Firebase initialization.

This module defines a Pydantic BaseSettings class to load configuration from environment,
and initializes the Firebase Admin SDK (Firestore DB) using the provided credentials.
Other modules import `settings` from here and receive the Firestore client through
the `get_db` dependency, so tests can swap it with `app.dependency_overrides`.
"""
from functools import lru_cache
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""
    firebase_cred_file: str = 'firebase_service_account.json'
    firebase_project_id: Optional[str] = None

    # Firebase credentials from environment variables (for Cloud Run)
    firebase_private_key_id: Optional[str] = None
    firebase_private_key: Optional[str] = None
    firebase_client_email: Optional[str] = None
    firebase_client_id: Optional[str] = None
    firebase_auth_uri: Optional[str] = None
    firebase_token_uri: Optional[str] = None
    firebase_auth_provider_x509_cert_url: Optional[str] = None
    firebase_client_x509_cert_url: Optional[str] = None

    # Web API key used to proxy email/password sign-in to Identity Toolkit
    firebase_web_api_key: str = ''

    debug: bool = False
    log_level: str = 'INFO'
    allowed_origins: str = '*'  # Comma-separated list or '*' for all

    # Outbound checkout hand-off
    whatsapp_phone: str = '56993177866'
    whatsapp_base_url: str = 'https://api.whatsapp.com/send'

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# Load settings from environment (.env file, etc.)
settings = Settings()


def _credential():
    # Cloud Run: every piece of the service account comes from the environment
    if all([
        settings.firebase_private_key_id,
        settings.firebase_private_key,
        settings.firebase_client_email,
        settings.firebase_client_id,
        settings.firebase_auth_uri,
        settings.firebase_token_uri,
        settings.firebase_auth_provider_x509_cert_url,
        settings.firebase_client_x509_cert_url,
    ]):
        cred_dict = {
            "type": "service_account",
            "project_id": settings.firebase_project_id,
            "private_key_id": settings.firebase_private_key_id,
            "private_key": settings.firebase_private_key.replace("\\n", "\n"),
            "client_email": settings.firebase_client_email,
            "client_id": settings.firebase_client_id,
            "auth_uri": settings.firebase_auth_uri,
            "token_uri": settings.firebase_token_uri,
            "auth_provider_x509_cert_url": settings.firebase_auth_provider_x509_cert_url,
            "client_x509_cert_url": settings.firebase_client_x509_cert_url,
        }
        return credentials.Certificate(cred_dict)
    # Local development: service account file
    return credentials.Certificate(settings.firebase_cred_file)


@lru_cache
def get_firebase_app() -> firebase_admin.App:
    """Initialize the default Firebase app once and return it."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        options = {'projectId': settings.firebase_project_id} if settings.firebase_project_id else None
        return firebase_admin.initialize_app(_credential(), options)


def get_db():
    """FastAPI dependency returning the Firestore client."""
    return firestore.client(get_firebase_app())

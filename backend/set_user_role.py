#!/usr/bin/env python3
"""
Assigns a panel role (admin | editor | viewer) to an existing Firebase user.
Writes `users/{uid}.role`, creating the profile document when missing.
"""

import sys
from datetime import datetime, timezone

from firebase_admin import auth, firestore

from santagemita.config import get_firebase_app
from santagemita.schemas.principal import ROLE_PERMISSIONS


def set_user_role(user_email: str, role: str) -> bool:
    """Stores `role` on the user's profile document."""
    if role not in ROLE_PERMISSIONS:
        print(f"❌ Unknown role: {role} (expected one of {', '.join(ROLE_PERMISSIONS)})")
        return False

    try:
        app = get_firebase_app()
        print("✅ Firebase Admin SDK initialized")
    except (ValueError, OSError) as e:
        print(f"❌ Firebase initialization failed: {e}")
        return False

    try:
        # Find the account by e-mail
        user = auth.get_user_by_email(user_email, app=app)
        print(f"✅ User found: {user.uid} - {user.email}")
    except auth.UserNotFoundError:
        print(f"❌ User not found: {user_email}")
        return False

    db = firestore.client(app)
    db.collection("users").document(user.uid).set(
        {
            "email": user.email,
            "uid": user.uid,
            "role": role,
            "status": "active",
            "updatedAt": datetime.now(timezone.utc).isoformat(),
        },
        merge=True,
    )
    print(f"✅ Role '{role}' stored for: {user_email}")
    return True


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("Usage: python set_user_role.py <user_email> <admin|editor|viewer>")
        print("Example: python set_user_role.py dueña@santagemita.cl admin")
        sys.exit(1)

    user_email, role = sys.argv[1], sys.argv[2]
    print(f"Setting role '{role}' for: {user_email}")

    if set_user_role(user_email, role):
        print("🎉 Role set successfully!")
        print("The new role applies on the user's next request.")
    else:
        print("💥 Failed to set role")
        sys.exit(1)

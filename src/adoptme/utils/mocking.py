"""
Synthetic users and pets for testing and seeding.
Nothing here touches the store; persistence is the caller's job.
"""

import uuid
from datetime import timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from faker import Faker

from adoptme.models.enums import UserRole

SPECIES = [
    "dog", "cat", "rabbit", "hamster", "parrot", "turtle",
    "guinea pig", "ferret", "canary", "goldfish", "horse", "snake",
]

_fake = Faker()


def generate_mock_pet(fake: Optional[Faker] = None) -> Dict[str, Any]:
    fake = fake or _fake
    return {
        "_id": ObjectId(),
        "name": fake.first_name(),
        "species": fake.random_element(SPECIES),
        "birthDate": fake.date_time_between(start_date="-15y", end_date="-1d", tzinfo=timezone.utc).isoformat(),
    }


def generate_mock_pets(count: int, fake: Optional[Faker] = None) -> List[Dict[str, Any]]:
    """Generate ``count`` independent pet records, each with a fresh ObjectId"""
    if count < 0:
        raise ValueError("count must be zero or positive")
    return [generate_mock_pet(fake) for _ in range(count)]


def generate_mock_user(fake: Optional[Faker] = None) -> Dict[str, Any]:
    fake = fake or _fake
    first_name = fake.first_name()
    last_name = fake.last_name()
    # Suffix keeps emails unique under the users.email index
    suffix = uuid.uuid4().hex[:8]
    return {
        "_id": ObjectId(),
        "first_name": first_name,
        "last_name": last_name,
        "email": f"{first_name}.{last_name}.{suffix}@example.com".lower(),
        "age": fake.random_int(min=18, max=80),
        "password": fake.password(length=12),
        "role": fake.random_element([role.value for role in UserRole]),
        "pets": [],
    }


def generate_mock_users(count: int, fake: Optional[Faker] = None) -> List[Dict[str, Any]]:
    """Generate ``count`` independent user records with unique emails"""
    if count < 0:
        raise ValueError("count must be zero or positive")
    return [generate_mock_user(fake) for _ in range(count)]

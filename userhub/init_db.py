"""Database initialization script with seed data."""

import argparse

from sqlalchemy.orm import Session

from userhub.constants import AccountStatus
from userhub.database import Base, SessionLocal, engine
from userhub.models import User
from userhub.services.auth_service import AuthService

DEFAULT_PASSWORD = "P4ssword"


def create_tables():
    """Create all database tables."""
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    print("Tables created successfully!")


def seed_data(db: Session, active_count: int = 25, inactive_count: int = 0):
    """Seed active (and optionally pending) users for local development."""
    print(f"\nSeeding {active_count} active and {inactive_count} pending users...")

    password_hash = AuthService.hash_password(DEFAULT_PASSWORD)
    users = []
    for i in range(active_count + inactive_count):
        active = i < active_count
        users.append(
            User(
                username=f"user{i + 1}",
                email=f"user{i + 1}@mail.com",
                password_hash=password_hash,
                status=AccountStatus.ACTIVE if active else AccountStatus.PENDING,
                activation_token=None if active else AuthService.generate_token(16),
            )
        )
    db.add_all(users)
    db.commit()

    print("Seed data created successfully!")
    print(f"  Users: user1@mail.com .. user{len(users)}@mail.com / {DEFAULT_PASSWORD}")


def init_db(active_count: int = 25, inactive_count: int = 0):
    """Initialize database with tables and seed data."""
    print("Initializing database...")

    create_tables()

    db = SessionLocal()
    try:
        existing_users = db.query(User).count()
        if existing_users > 0:
            print(f"\nDatabase already has {existing_users} users. Skipping seed data.")
            return

        seed_data(db, active_count, inactive_count)
        print("\nDatabase initialization complete!")

    except Exception as e:
        print(f"\nError during database initialization: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create tables and seed development users")
    parser.add_argument("--active", type=int, default=25, help="Number of active users")
    parser.add_argument("--inactive", type=int, default=0, help="Number of pending users")
    args = parser.parse_args()
    init_db(args.active, args.inactive)

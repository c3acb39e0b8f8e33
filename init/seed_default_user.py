"""
Script to create the user that owns every deck served by this instance.

The review flow and the deck endpoints act on behalf of DEFAULT_USER_ID, so that
user has to exist before decks can be created.
"""
import sys
import logging
from sqlmodel import Session, SQLModel

from flashdeck.core.config import settings
from flashdeck.core.database import engine
from flashdeck.models import User

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

DEFAULT_NAME = "glencoden"
DEFAULT_EMAIL = "glen@coden.io"


def seed_default_user(session: Session, name: str = DEFAULT_NAME, email: str = DEFAULT_EMAIL) -> User:
    """Return the configured user, creating it if it does not exist yet."""
    user = session.get(User, settings.default_user_id)
    if user:
        logger.info(f"User {user.id} already exists ({user.name})")
        return user

    user = User(id=settings.default_user_id, name=name, email=email)
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info(f"Created user {user.id} ({user.name})")
    return user


if __name__ == "__main__":
    logger.info("Seeding default user...")
    try:
        SQLModel.metadata.create_all(engine)
        with Session(engine) as session:
            seed_default_user(session)
        logger.info("Successfully completed!")
    except Exception as e:
        logger.error("Error while seeding default user: %s", e, exc_info=True)
        sys.exit(1)

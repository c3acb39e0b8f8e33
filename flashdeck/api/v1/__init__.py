"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from flashdeck.api.v1.endpoints import users, decks, cards, review

api_router = APIRouter()

# Include all CRUD routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(users.router)
api_router.include_router(decks.router)
api_router.include_router(cards.router)

# Review pages live at the application root, outside the API prefix
review_router = review.router

from jargon_buster.models.base import Base
from jargon_buster.models.term import Term
from jargon_buster.models.user import User

__all__ = [
    "Base",
    "Term",
    "User",
]

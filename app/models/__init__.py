"""ORM model registry: importing this module registers every table on Base.metadata.

Alembic ``env.py`` imports ``Base`` from here (not from ``base.py``) so that
autogenerate sees all tables.  Application code can also do::

    from app.models import Farm, Plantation, State, ...
"""

# ── Base & Mixins ───────────────────────────────────────────────────────────
from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

# ── Crops, harvests, plantations ───────────────────────────────────────────
from app.models.crops import Crop, Harvest, Plantation

# ── Enums ───────────────────────────────────────────────────────────────────
from app.models.enums import DocumentTypeEnum

# ── Farms & owners ──────────────────────────────────────────────────────────
from app.models.farm import Farm

# ── Geography ───────────────────────────────────────────────────────────────
from app.models.locations import City, State
from app.models.producer import Producer

__all__ = [
    # Base & mixins
    "Base",
    "City",
    "Crop",
    # Enums
    "DocumentTypeEnum",
    "Farm",
    "Harvest",
    "Plantation",
    "Producer",
    # Geography
    "State",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
]
